import logging
from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from clubhub.controller.event_controller import retrieve_event_controller
from clubhub.exceptions import DuplicateError, ValidationError
from clubhub.models.event_model import Event
from clubhub.models.registration_model import EventRegistration
from clubhub.models.user_model import User

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "registrationNo", "phoneNumber", "course", "section", "year", "department")
TEAM_MEMBER_FIELDS = ("name", "registrationNo", "phoneNumber", "course")


def _clean(value):
    if value is None:
        return ""
    return str(value).strip()


def normalize_registration_no(value) -> str:
    return _clean(value).upper()


def missing_fields(data: dict, fields=REQUIRED_FIELDS) -> list:
    return [f for f in fields if not _clean(data.get(f))]


# ------------------ Validation ------------------
def validate_registration_fields(data: dict) -> dict:
    missing = missing_fields(data)
    if missing:
        raise ValidationError(
            f"Missing required fields: {', '.join(missing)}",
            missingFields=missing,
        )

    phone = _clean(data.get("phoneNumber"))
    return {
        "name": _clean(data.get("name")),
        "registration_no": normalize_registration_no(data.get("registrationNo")),
        "phone_number": phone,
        "whatsapp_number": _clean(data.get("whatsappNumber")) or phone,
        "course": _clean(data.get("course")),
        "section": _clean(data.get("section")),
        "year": _clean(data.get("year")),
        "department": _clean(data.get("department")),
    }


def validate_team(event: Event, data: dict) -> dict:
    """Team fields for the registration; raises when hackathon team rules fail."""
    if not event.team_mode:
        return {
            "is_team_registration": bool(data.get("isTeamRegistration")),
            "team_name": _clean(data.get("teamName")) or None,
            "team_members": [],
        }

    team_name = _clean(data.get("teamName"))
    if not team_name:
        raise ValidationError("Team name is required for hackathon registration")

    members = data.get("teamMembers") or []
    if not isinstance(members, list):
        raise ValidationError("teamMembers must be a list")

    settings = event.team_settings or {}
    min_size = settings.get("minTeamSize") or 1
    max_size = settings.get("maxTeamSize") or 4
    team_size = len(members) + 1  # leader included
    if team_size < min_size or team_size > max_size:
        raise ValidationError(
            f"Team must have between {min_size} and {max_size} members (including team leader)",
            teamSize=team_size,
        )

    cleaned = []
    for member in members:
        if not isinstance(member, dict) or missing_fields(member, TEAM_MEMBER_FIELDS):
            raise ValidationError("All team members must have name, registration number, phone, and course")
        cleaned.append({
            "name": _clean(member["name"]),
            "registrationNo": normalize_registration_no(member["registrationNo"]),
            "phoneNumber": _clean(member["phoneNumber"]),
            "course": _clean(member["course"]),
        })

    return {"is_team_registration": True, "team_name": team_name, "team_members": cleaned}


def duplicate_registration_error(existing: EventRegistration = None, message: str = None) -> DuplicateError:
    extra = {}
    if existing is not None:
        extra["existingRegistration"] = {
            "registrationNo": existing.registration_no,
            "registeredAt": existing.registered_at,
        }
    return DuplicateError(
        message or "This registration number is already registered for this event",
        error="DUPLICATE_REGISTRATION",
        **extra,
    )


async def ensure_not_registered(db: Session, event: Event, registration_no: str, user: User = None):
    existing = db.query(EventRegistration).filter(
        EventRegistration.event_id == event.id,
        EventRegistration.registration_no == registration_no,
    ).first()
    if existing:
        raise duplicate_registration_error(existing)

    if user is not None:
        user_reg = db.query(EventRegistration).filter(
            EventRegistration.event_id == event.id,
            EventRegistration.user_id == user.id,
        ).first()
        if user_reg:
            raise duplicate_registration_error(user_reg, "You have already registered for this event")


async def prepare_registration(db: Session, event: Event, data: dict, user: User = None) -> dict:
    fields = validate_registration_fields(data)
    await ensure_not_registered(db, event, fields["registration_no"], user)
    fields.update(validate_team(event, data))
    return fields


# ------------------ Persist ------------------
def save_registration(db: Session, event: Event, fields: dict, user: User = None,
                      payment_status: str = "free", payment=None) -> EventRegistration:
    """Insert the registration and bump the event counter in one transaction."""
    registration = EventRegistration(
        event_id=event.id,
        user_id=user.id if user is not None else None,
        payment_status=payment_status,
        registered_at=datetime.utcnow(),
        **fields,
    )
    db.add(registration)
    if payment is not None:
        payment.registration = registration
    db.query(Event).filter(Event.id == event.id).update(
        {Event.registration_count: Event.registration_count + 1},
        synchronize_session=False,
    )
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("Unique constraint rejected registration %s for event %s",
                       fields.get("registration_no"), event.id)
        raise duplicate_registration_error()
    db.refresh(registration)
    return registration


def registration_summary(registration: EventRegistration, event: Event) -> dict:
    return {
        "id": registration.id,
        "name": registration.name,
        "registrationNo": registration.registration_no,
        "paymentStatus": registration.payment_status,
        "event": event.summary(),
    }


# ------------------ Register for Event ------------------
async def register_for_event(db: Session, identifier: str, data: dict, user: User = None) -> dict:
    event = await retrieve_event_controller(db, identifier)

    missing = missing_fields(data)
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}", missingFields=missing)

    if event.requires_payment:
        raise ValidationError(
            "This is a paid event. Please complete payment first.",
            requiresPayment=True,
            price=event.price,
        )

    fields = await prepare_registration(db, event, data, user)
    registration = save_registration(db, event, fields, user, payment_status="free")

    logger.info("Registration %s saved for event %s", registration.id, event.id)
    return registration_summary(registration, event)


# ------------------ Retrieve Registrations ------------------
async def retrieve_event_registrations(db: Session, identifier: str):
    event = await retrieve_event_controller(db, identifier)
    return (
        db.query(EventRegistration)
        .options(joinedload(EventRegistration.user))
        .filter(EventRegistration.event_id == event.id)
        .order_by(EventRegistration.registered_at.desc(), EventRegistration.id.desc())
        .all()
    )


async def check_registration_controller(db: Session, identifier: str, user: User = None):
    event = await retrieve_event_controller(db, identifier)
    if user is None:
        return None, event
    registration = db.query(EventRegistration).filter(
        EventRegistration.event_id == event.id,
        EventRegistration.user_id == user.id,
    ).first()
    return registration, event


async def retrieve_user_registrations(db: Session, user: User):
    return (
        db.query(EventRegistration)
        .options(joinedload(EventRegistration.event))
        .filter(EventRegistration.user_id == user.id)
        .order_by(EventRegistration.registered_at.desc(), EventRegistration.id.desc())
        .all()
    )
