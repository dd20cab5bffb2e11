from clubhub.controller.crud_controller import add_item, retrieve_items, update_item, delete_item
from clubhub.dispatcher import RouteTable
from clubhub.models.submission_model import Submission
from clubhub.response_model import ResponseModel, json_response
from clubhub.schema.base import load_payload, dump, dump_many
from clubhub.schema.submission_schema import SubmissionCreate, SubmissionUpdate, SubmissionOut

router = RouteTable()


# ----------------------- Join request (public) -----------------------
@router.route("POST", "/submissions")
async def add_submission(ctx):
    payload = load_payload(SubmissionCreate, ctx.body)
    submission = await add_item(ctx.db, Submission, {**payload.model_dump(), "status": "pending"})
    return json_response(
        ResponseModel(None, "Join request submitted successfully!", submission=dump(SubmissionOut, submission)),
        status_code=201,
    )


@router.route("GET", "/submissions", auth="admin")
async def get_submissions(ctx):
    items = await retrieve_items(ctx.db, Submission, order_by=(Submission.submitted_at.desc(), Submission.id.desc()))
    return dump_many(SubmissionOut, items)


@router.route("PUT", "/submissions/:id", auth="admin")
async def update_submission(ctx):
    payload = load_payload(SubmissionUpdate, ctx.body)
    item = await update_item(ctx.db, Submission, ctx.params["id"], payload.model_dump(exclude_unset=True))
    return dump(SubmissionOut, item)


@router.route("DELETE", "/submissions/:id", auth="admin")
async def delete_submission(ctx):
    await delete_item(ctx.db, Submission, ctx.params["id"])
    return ResponseModel(None, "Submission deleted")


__all__ = ["router"]
