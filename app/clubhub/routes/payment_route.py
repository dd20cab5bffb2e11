from clubhub.controller.payment_controller import (
    create_payment_order, update_payment_status, retrieve_payment_history,
)
from clubhub.dispatcher import RouteTable
from clubhub.response_model import ResponseModel, json_response
from clubhub.schema.base import load_payload, dump
from clubhub.schema.payment_schema import PaymentStatusUpdate, PaymentOut

router = RouteTable()


# ----------------------- CREATE Payment Order -----------------------
@router.route("POST", "/events/:id/payment-order", auth="user")
async def add_payment_order(ctx):
    payment = await create_payment_order(ctx.db, ctx.params["id"], ctx.body, ctx.user)
    return json_response(
        ResponseModel(None, "Payment order created",
                      orderId=payment.order_id, amount=payment.amount, currency=payment.currency),
        status_code=201,
    )


# ----------------------- PAYMENT History -----------------------
@router.route("GET", "/payments/history", auth="admin")
async def get_payment_history(ctx):
    payments = await retrieve_payment_history(ctx.db)
    result = []
    for payment in payments:
        item = dump(PaymentOut, payment)
        event = payment.event
        item["event"] = {
            "id": event.id,
            "title": event.title,
            "date": event.date,
            "location": event.location or "TBA",
            "price": event.price,
        } if event else {"title": "Unknown Event"}
        result.append(item)
    return ResponseModel(None, "Payment history retrieved", count=len(result), payments=result)


# ----------------------- SETTLE Payment Order -----------------------
@router.route("PUT", "/payments/:orderId", auth="admin")
async def settle_payment(ctx):
    payload = load_payload(PaymentStatusUpdate, ctx.body)
    payment = await update_payment_status(ctx.db, ctx.params["orderId"], payload.status, payload.payment_id)
    return ResponseModel(dump(PaymentOut, payment), f"Payment marked {payment.status}")


__all__ = ["router"]
