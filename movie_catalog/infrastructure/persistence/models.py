from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, registry

table_registry = registry()


@table_registry.mapped_as_dataclass
class Movie:
    __tablename__ = "filme"

    id: Mapped[int] = mapped_column(init=False, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column("titulo", String)
    director: Mapped[str] = mapped_column("diretor", String)
    release_year: Mapped[str] = mapped_column("ano_lancamento", String)
