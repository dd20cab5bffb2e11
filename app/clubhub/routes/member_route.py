from clubhub.controller.crud_controller import add_item, retrieve_items, update_item, delete_item
from clubhub.dispatcher import RouteTable
from clubhub.models.member_model import Member
from clubhub.response_model import ResponseModel, json_response
from clubhub.schema.base import load_payload, dump, dump_many
from clubhub.schema.member_schema import MemberCreate, MemberUpdate, MemberOut

router = RouteTable()


@router.route("GET", "/members")
async def get_members(ctx):
    members = await retrieve_items(ctx.db, Member, order_by=(Member.order.asc(), Member.id.asc()))
    return dump_many(MemberOut, members)


@router.route("POST", "/members", auth="admin")
async def add_member(ctx):
    payload = load_payload(MemberCreate, ctx.body)
    member = await add_item(ctx.db, Member, payload.model_dump())
    return json_response(dump(MemberOut, member), status_code=201)


@router.route("PUT", "/members/:id", auth="admin")
async def update_member(ctx):
    payload = load_payload(MemberUpdate, ctx.body)
    member = await update_item(ctx.db, Member, ctx.params["id"], payload.model_dump(exclude_unset=True))
    return dump(MemberOut, member)


@router.route("DELETE", "/members/:id", auth="admin")
async def delete_member(ctx):
    await delete_item(ctx.db, Member, ctx.params["id"])
    return ResponseModel(None, "Member deleted")


__all__ = ["router"]
