from clubhub.controller.crud_controller import add_item, retrieve_items, update_item, delete_item
from clubhub.dispatcher import RouteTable
from clubhub.models.testimonial_model import Testimonial
from clubhub.response_model import ResponseModel, json_response
from clubhub.schema.base import load_payload, dump, dump_many
from clubhub.schema.testimonial_schema import TestimonialSubmit, TestimonialUpdate, TestimonialOut

router = RouteTable()

NEWEST_FIRST = (Testimonial.created_at.desc(), Testimonial.id.desc())


# ----------------------- Approved (public) -----------------------
@router.route("GET", "/testimonials")
async def get_testimonials(ctx):
    items = await retrieve_items(ctx.db, Testimonial, order_by=NEWEST_FIRST, status="approved")
    return dump_many(TestimonialOut, items)


@router.route("GET", "/testimonials/all", auth="admin")
async def get_all_testimonials(ctx):
    items = await retrieve_items(ctx.db, Testimonial, order_by=NEWEST_FIRST)
    return dump_many(TestimonialOut, items)


# ----------------------- Submit (public, pending review) -----------------------
@router.route("POST", "/testimonials/submit")
async def submit_testimonial(ctx):
    payload = load_payload(TestimonialSubmit, ctx.body)
    await add_item(ctx.db, Testimonial, {**payload.model_dump(), "status": "pending"})
    return json_response(ResponseModel(None, "Testimonial submitted for approval"), status_code=201)


@router.route("PUT", "/testimonials/:id", auth="admin")
async def update_testimonial(ctx):
    payload = load_payload(TestimonialUpdate, ctx.body)
    item = await update_item(ctx.db, Testimonial, ctx.params["id"], payload.model_dump(exclude_unset=True))
    return dump(TestimonialOut, item)


@router.route("DELETE", "/testimonials/:id", auth="admin")
async def delete_testimonial(ctx):
    await delete_item(ctx.db, Testimonial, ctx.params["id"])
    return ResponseModel(None, "Testimonial deleted")


__all__ = ["router"]
