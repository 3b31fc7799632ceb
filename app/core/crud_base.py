# app/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.
모든 메서드는 비동기(async) 환경에서 동작하며, 'id' 기본키를 가진 테이블 모델을 가정합니다.

DB 작업 중 발생한 SQLAlchemy 예외는 세션을 롤백한 뒤 StorageError로 감싸서 던집니다.
조회 대상이 없는 경우도 별도로 구분하지 않고 StorageError가 됩니다.
"""

from typing import Any, Generic, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.exceptions import StorageError

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    모든 CRUD 작업에 대한 기본 클래스를 정의합니다.
    """
    def __init__(self, model: Type[ModelType]):
        self.model = model

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    async def get(self, db: AsyncSession, id: Any) -> ModelType:
        """
        ID를 기준으로 단일 레코드를 조회합니다. 레코드가 없으면 StorageError를 던집니다.
        """
        statement = select(self.model).where(self.model.id == id)
        try:
            result = await db.execute(statement)
            return result.scalar_one()
        except SQLAlchemyError as e:
            raise StorageError(f"select {self.table_name} by id {id}: {e}") from e

    async def create(self, db: AsyncSession, *, obj_in: CreateSchemaType) -> ModelType:
        """
        새로운 레코드를 생성합니다. 중복 키 등 제약 조건 위반은 StorageError가 됩니다.
        """
        db_obj = self.model(**obj_in.model_dump())
        db.add(db_obj)
        try:
            await db.commit()
            await db.refresh(db_obj)
        except SQLAlchemyError as e:
            await db.rollback()
            raise StorageError(f"insert into {self.table_name}: {e}") from e
        return db_obj

    async def patch(self, db: AsyncSession, *, id: Any, obj_in: UpdateSchemaType) -> ModelType:
        """
        요청에 포함된(set) 필드만 갱신하고, 갱신 후 상태를 반환합니다.
        UPDATE ... RETURNING 한 문장으로 처리하므로 읽기-수정이 DB 안에서 원자적으로 이루어집니다.
        갱신할 필드가 하나도 없으면 쿼리를 만들지 않고 실패합니다.
        """
        update_data = obj_in.model_dump(exclude_unset=True)
        if not update_data:
            raise StorageError(f"update {self.table_name}: no update values provided")

        statement = (
            update(self.model)
            .where(self.model.id == id)
            .values(**update_data)
            .returning(self.model)
            .execution_options(populate_existing=True)
        )
        try:
            result = await db.execute(statement)
            db_obj = result.scalar_one()
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            raise StorageError(f"update {self.table_name} by id {id}: {e}") from e
        return db_obj

    async def delete(self, db: AsyncSession, *, id: Any) -> None:
        """
        ID를 기준으로 레코드를 삭제합니다. 삭제된 행이 없어도 오류로 보지 않습니다.
        """
        statement = delete(self.model).where(self.model.id == id)
        try:
            await db.execute(statement)
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            raise StorageError(f"delete from {self.table_name} by id {id}: {e}") from e
