from clubhub.controller.auth_controller import (
    login_controller, signup_controller, profile_controller, update_profile_controller,
)
from clubhub.dispatcher import RouteTable
from clubhub.response_model import json_response
from clubhub.schema.base import load_payload
from clubhub.schema.user_schema import SignupRequest, ProfileUpdate

router = RouteTable()


# ----------------------- LOGIN -----------------------
@router.route("POST", "/auth/login")
async def login(ctx):
    return await login_controller(ctx.db, ctx.body.get("email"), ctx.body.get("password"))


# ----------------------- SIGNUP -----------------------
@router.route("POST", "/auth/signup")
async def signup(ctx):
    payload = load_payload(SignupRequest, ctx.body)
    result = await signup_controller(ctx.db, payload.model_dump())
    return json_response(result, status_code=201)


# ----------------------- CURRENT USER -----------------------
@router.route("GET", "/auth/me", auth="user")
async def me(ctx):
    return await profile_controller(ctx.user)


# ----------------------- UPDATE PROFILE -----------------------
@router.route("PUT", "/auth/profile", auth="user")
async def update_profile(ctx):
    payload = load_payload(ProfileUpdate, ctx.body)
    return await update_profile_controller(ctx.db, ctx.user, payload.model_dump(exclude_unset=True))


__all__ = ["router"]
