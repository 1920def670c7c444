"""SQLAlchemy Declarative Base.

Product 도메인 ORM 모델이 공유하는 metadata입니다.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """ORM 모델 베이스."""
