from fastapi import APIRouter, Depends

from backend_fastapi.api.deps import listar_categorias_use_case
from backend_fastapi.api.schemas import CategoriaOut
from core.application.listar_categorias import ListarCategoriasUseCase
from core.domain.models.categoria import Categoria

router = APIRouter(prefix="/categorias", tags=["categorias"])


@router.get("", response_model=list[CategoriaOut], summary="Listar as categorias")
def listar_categorias(
    use_case: ListarCategoriasUseCase = Depends(listar_categorias_use_case),
) -> list[Categoria]:
    return use_case.execute()
