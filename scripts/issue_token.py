# scripts/issue_token.py

"""
쓰기 API(POST/PATCH/DELETE /companies)에 사용할 Bearer 토큰을 발급하는 운영용 스크립트입니다.
SECRET_KEY, ALGORITHM은 .env 또는 환경 변수의 설정을 그대로 사용합니다.

실행: python -m scripts.issue_token --subject operator --minutes 60
"""

from datetime import timedelta
from typing import Optional

import typer

from app.core.config import get_settings
from app.core.security import create_access_token

cli = typer.Typer()


@cli.command()
def main(
    subject: str = typer.Option(
        "operator", '--subject', '-s',
        help="토큰의 sub 클레임에 들어갈 값입니다."
    ),
    minutes: Optional[int] = typer.Option(
        None, '--minutes', '-m',
        help="만료 시간(분). 생략하면 ACCESS_TOKEN_EXPIRE_MINUTES 설정값을 사용합니다."
    ),
):
    """
    서명된 JWT를 표준 출력으로 내보냅니다.
    """
    settings = get_settings()
    expires_delta = timedelta(minutes=minutes) if minutes else None
    token = create_access_token({"sub": subject}, settings, expires_delta=expires_delta)
    typer.echo(token)


if __name__ == "__main__":
    cli()
