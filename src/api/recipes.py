"""Recipe API endpoints."""

from fastapi import APIRouter, HTTPException, Query, status

from src.api.dependencies import RecipeServiceDep
from src.models.recipe import Recipe
from src.schemas.recipe import RecipeCreate, RecipeResponse, RecipeUpdate
from src.services.recipe_service import RecipeService

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])


def get_existing_recipe(service: RecipeService, recipe_id: int) -> Recipe:
    """Get a recipe or raise 404."""
    recipe = service.get(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")
    return recipe


@router.get("", response_model=list[RecipeResponse])
def list_recipes(
    service: RecipeServiceDep,
    product_id: int | None = Query(default=None, description="Only recipes using this product"),
):
    """List recipes by name, optionally only those that use a product."""
    if product_id is not None:
        return service.list_by_product(product_id)
    return service.list_all()


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
def create_recipe(recipe_data: RecipeCreate, service: RecipeServiceDep):
    """Create a recipe with the products it uses."""
    recipe_id = service.create(recipe_data)
    return get_existing_recipe(service, recipe_id)


@router.get("/{recipe_id}", response_model=RecipeResponse)
def get_recipe(recipe_id: int, service: RecipeServiceDep):
    """Get a specific recipe."""
    return get_existing_recipe(service, recipe_id)


@router.put("/{recipe_id}", response_model=RecipeResponse)
def update_recipe(recipe_id: int, recipe_data: RecipeUpdate, service: RecipeServiceDep):
    """Update a recipe. ``product_ids`` replaces the whole product set."""
    get_existing_recipe(service, recipe_id)
    service.update(recipe_id, recipe_data)
    return get_existing_recipe(service, recipe_id)


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_recipe(recipe_id: int, service: RecipeServiceDep):
    """Delete a recipe and its product links."""
    service.delete(recipe_id)
