import os
from playhouse.db_url import connect

from core.domain.models.categoria import CATEGORIAS_PADRAO

# Default to SQLite
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///test.db")

# Initialize the database connection
db = connect(DATABASE_URL)


def init_db() -> None:
    # Imported here: the models module depends on `db` above.
    from infrastructure.peewee.model.models import TABELAS, CategoriaModel

    db.connect(reuse_if_open=True)
    db.create_tables(TABELAS, safe=True)
    with db.atomic():
        if not CategoriaModel.select().exists():
            CategoriaModel.insert_many(
                [{"descricao": descricao} for descricao in CATEGORIAS_PADRAO]
            ).execute()
