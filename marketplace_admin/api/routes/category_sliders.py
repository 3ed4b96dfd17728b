"""Category Slider Routes — priority-ordered sliders with status toggle."""

from fastapi import APIRouter, Depends, status

from marketplace_admin.api.deps import get_blob_store, get_current_actor, get_store
from marketplace_admin.schemas.catalog import SliderCreate, SliderUpdate
from marketplace_admin.schemas.common import StatusUpdate
from marketplace_admin.services.slider_service import CategorySliderService

router = APIRouter(prefix="/api/v1/category-sliders", tags=["category-sliders"])


def get_slider_service(
    store=Depends(get_store),
    actor=Depends(get_current_actor),
    blobs=Depends(get_blob_store),
) -> CategorySliderService:
    return CategorySliderService(store, actor, blobs)


@router.get("")
async def list_sliders(
    service: CategorySliderService = Depends(get_slider_service),
):
    return await service.list_sliders()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_slider(
    body: SliderCreate,
    service: CategorySliderService = Depends(get_slider_service),
):
    return await service.create(body)


@router.patch("/{slider_id}")
async def update_slider(
    slider_id: str, body: SliderUpdate,
    service: CategorySliderService = Depends(get_slider_service),
):
    return await service.update(slider_id, body)


@router.put("/{slider_id}/status")
async def set_slider_status(
    slider_id: str, body: StatusUpdate,
    service: CategorySliderService = Depends(get_slider_service),
):
    return await service.set_status(slider_id, body.status)


@router.delete("/{slider_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_slider(
    slider_id: str,
    service: CategorySliderService = Depends(get_slider_service),
):
    await service.delete(slider_id)
