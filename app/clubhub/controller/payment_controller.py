import logging
import uuid
from datetime import datetime

from sqlalchemy.orm import Session, joinedload

from clubhub.controller.event_controller import retrieve_event_controller
from clubhub.controller.registration_controller import prepare_registration, save_registration
from clubhub.exceptions import NotFoundError, ValidationError
from clubhub.models.event_model import Event
from clubhub.models.payment_model import Payment
from clubhub.models.user_model import User

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 200


def generate_order_id() -> str:
    return f"order_{uuid.uuid4().hex[:20]}"


# ------------------ Create Payment Order ------------------
async def create_payment_order(db: Session, identifier: str, data: dict, user: User) -> Payment:
    event = await retrieve_event_controller(db, identifier)
    if not event.requires_payment:
        raise ValidationError("This event is free. Register directly instead.")

    fields = await prepare_registration(db, event, data, user)

    payment = Payment(
        order_id=generate_order_id(),
        event_id=event.id,
        user_id=user.id,
        user_name=fields["name"],
        user_email=user.email,
        registration_no=fields["registration_no"],
        phone_number=fields["phone_number"],
        amount=event.price,
        currency="INR",
        status="pending",
        registration_data=fields,
    )
    db.add(payment)
    db.commit()
    db.refresh(payment)

    logger.info("Payment order %s created for event %s", payment.order_id, event.id)
    return payment


# ------------------ Settle Payment Order ------------------
async def update_payment_status(db: Session, order_id: str, status: str, payment_id: str = None) -> Payment:
    payment = db.query(Payment).filter(Payment.order_id == order_id).first()
    if not payment:
        raise NotFoundError("Payment order not found")
    if payment.status != "pending":
        raise ValidationError(f"Payment order already {payment.status}")

    payment.payment_id = payment_id or payment.payment_id
    if status == "failed":
        payment.status = "failed"
        db.commit()
        db.refresh(payment)
        logger.info("Payment order %s failed", order_id)
        return payment

    event = db.query(Event).filter(Event.id == payment.event_id).first()
    user = db.query(User).filter(User.id == payment.user_id).first() if payment.user_id else None
    payment.status = "success"
    payment.paid_at = datetime.utcnow()
    save_registration(
        db, event, dict(payment.registration_data or {}), user,
        payment_status="completed", payment=payment,
    )
    db.refresh(payment)

    logger.info("Payment order %s settled, registration %s", order_id, payment.registration_id)
    return payment


# ------------------ Payment History ------------------
async def retrieve_payment_history(db: Session, limit: int = HISTORY_LIMIT):
    return (
        db.query(Payment)
        .options(joinedload(Payment.event))
        .order_by(Payment.created_at.desc(), Payment.id.desc())
        .limit(limit)
        .all()
    )
