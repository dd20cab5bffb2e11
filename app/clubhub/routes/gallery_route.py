from clubhub.controller.crud_controller import add_item, retrieve_items, update_item, delete_item
from clubhub.dispatcher import RouteTable
from clubhub.models.gallery_model import GalleryItem
from clubhub.response_model import ResponseModel, json_response
from clubhub.schema.base import load_payload, dump, dump_many
from clubhub.schema.gallery_schema import GalleryCreate, GalleryUpdate, GalleryOut

router = RouteTable()


@router.route("GET", "/gallery")
async def get_gallery(ctx):
    items = await retrieve_items(ctx.db, GalleryItem, order_by=(GalleryItem.created_at.desc(), GalleryItem.id.desc()))
    return dump_many(GalleryOut, items)


@router.route("POST", "/gallery", auth="admin")
async def add_gallery_item(ctx):
    payload = load_payload(GalleryCreate, ctx.body)
    item = await add_item(ctx.db, GalleryItem, payload.model_dump())
    return json_response(dump(GalleryOut, item), status_code=201)


@router.route("PUT", "/gallery/:id", auth="admin")
async def update_gallery_item(ctx):
    payload = load_payload(GalleryUpdate, ctx.body)
    item = await update_item(ctx.db, GalleryItem, ctx.params["id"], payload.model_dump(exclude_unset=True))
    return dump(GalleryOut, item)


@router.route("DELETE", "/gallery/:id", auth="admin")
async def delete_gallery_item(ctx):
    await delete_item(ctx.db, GalleryItem, ctx.params["id"])
    return ResponseModel(None, "Gallery item deleted")


__all__ = ["router"]
