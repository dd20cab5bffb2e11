from clubhub.controller.event_controller import (
    retrieve_events_controller, retrieve_event_controller,
    add_event_controller, update_event_controller, delete_event_controller,
)
from clubhub.controller.registration_controller import (
    register_for_event, retrieve_event_registrations,
    check_registration_controller, retrieve_user_registrations,
)
from clubhub.dispatcher import RouteTable
from clubhub.response_model import ResponseModel, json_response
from clubhub.schema.base import load_payload, dump, dump_many
from clubhub.schema.event_schema import EventCreate, EventUpdate, EventOut
from clubhub.schema.registration_schema import RegistrationOut

router = RouteTable()


def _event_data(payload, exclude_unset=False) -> dict:
    data = payload.model_dump(exclude_unset=exclude_unset)
    if payload.team_settings is not None and "team_settings" in data:
        data["team_settings"] = payload.team_settings.model_dump(by_alias=True)
    return data


# ----------------------- USER Registrations -----------------------
# Declared ahead of the /events/:id routes so "user" is never read as an event id
@router.route("GET", "/events/user/registrations", auth="user")
async def get_my_registrations(ctx):
    registrations = await retrieve_user_registrations(ctx.db, ctx.user)
    result = []
    for registration in registrations:
        item = dump(RegistrationOut, registration)
        item["event"] = dump(EventOut, registration.event)
        result.append(item)
    return result


# ----------------------- GET ALL Events -----------------------
@router.route("GET", "/events")
async def get_events(ctx):
    events = await retrieve_events_controller(
        ctx.db, status=ctx.query.get("status"), event_type=ctx.query.get("type")
    )
    return dump_many(EventOut, events)


# ----------------------- GET Event -----------------------
@router.route("GET", "/events/:id")
async def get_event(ctx):
    event = await retrieve_event_controller(ctx.db, ctx.params["id"])
    return dump(EventOut, event)


# ----------------------- ADD Event -----------------------
@router.route("POST", "/events", auth="admin")
async def add_event(ctx):
    payload = load_payload(EventCreate, ctx.body)
    new_event = await add_event_controller(ctx.db, _event_data(payload))
    return json_response(dump(EventOut, new_event), status_code=201)


# ------------------ Update Event ------------------
@router.route("PUT", "/events/:id", auth="admin")
async def update_event(ctx):
    payload = load_payload(EventUpdate, ctx.body)
    event = await update_event_controller(ctx.db, ctx.params["id"], _event_data(payload, exclude_unset=True))
    return dump(EventOut, event)


# ------------------ Delete Event ------------------
@router.route("DELETE", "/events/:id", auth="admin")
async def delete_event(ctx):
    await delete_event_controller(ctx.db, ctx.params["id"])
    return ResponseModel(None, "Event deleted")


# ----------------------- REGISTER for Event -----------------------
@router.route("POST", "/events/:id/register", auth="optional")
async def register_event(ctx):
    registration = await register_for_event(ctx.db, ctx.params["id"], ctx.body, ctx.user)
    return json_response(
        ResponseModel(None, "Registration successful! You will receive confirmation shortly.",
                      registration=registration),
        status_code=201,
    )


# ----------------------- Event Registrations -----------------------
@router.route("GET", "/events/:id/registrations", auth="admin")
async def get_event_registrations(ctx):
    registrations = await retrieve_event_registrations(ctx.db, ctx.params["id"])
    result = []
    for registration in registrations:
        item = dump(RegistrationOut, registration)
        user = registration.user
        item["user"] = {"id": user.id, "name": user.name, "email": user.email} if user else None
        result.append(item)
    return result


# ----------------------- CHECK Registration -----------------------
@router.route("GET", "/events/:id/check-registration", auth="optional")
async def check_registration(ctx):
    registration, _ = await check_registration_controller(ctx.db, ctx.params["id"], ctx.user)
    return {
        "isRegistered": registration is not None,
        "registration": dump(RegistrationOut, registration) if registration else None,
    }


__all__ = ["router"]
