import logging
import re

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from clubhub.controller.crud_controller import parse_id
from clubhub.exceptions import DuplicateError, NotFoundError
from clubhub.models.event_model import Event

logger = logging.getLogger(__name__)


# ------------------ Slug helpers ------------------
def generate_slug(title: str) -> str:
    slug = (title or "").lower().strip()
    slug = re.sub(r"[^\w\s-]", "", slug, flags=re.ASCII)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    slug = slug.strip("-")
    return slug or "event"


def unique_slug(db: Session, title: str, event_id: int = None) -> str:
    base_slug = generate_slug(title)
    slug = base_slug
    counter = 1
    while True:
        query = db.query(Event.id).filter(Event.slug == slug)
        if event_id is not None:
            query = query.filter(Event.id != event_id)
        if query.first() is None:
            return slug
        slug = f"{base_slug}-{counter}"
        counter += 1


# ------------------ Retrieve ALL Events ------------------
async def retrieve_events_controller(db: Session, status: str = None, event_type: str = None):
    query = db.query(Event)
    if status:
        query = query.filter(Event.status == status)
    if event_type:
        query = query.filter(Event.event_type == event_type)
    return query.order_by(Event.date.desc(), Event.id.desc()).all()


# ------------------ Retrieve Event by id or slug ------------------
async def find_event(db: Session, identifier: str):
    event = None
    pk = parse_id(identifier)
    if pk is not None:
        event = db.query(Event).filter(Event.id == pk).first()
    if event is None:
        event = db.query(Event).filter(Event.slug == identifier).first()
    return event


async def retrieve_event_controller(db: Session, identifier: str) -> Event:
    event = await find_event(db, identifier)
    if not event:
        raise NotFoundError("Event not found")
    return event


async def retrieve_event_by_id(db: Session, event_id: str) -> Event:
    event = None
    pk = parse_id(event_id)
    if pk is not None:
        event = db.query(Event).filter(Event.id == pk).first()
    if not event:
        raise NotFoundError("Event not found")
    return event


def commit_with_unique_slug(db: Session, build) -> Event:
    """Commit the event ``build()`` stages, retrying once if its slug was claimed meanwhile."""
    for attempt in range(2):
        event = build()
        try:
            db.commit()
            return event
        except IntegrityError:
            db.rollback()
            logger.warning("Slug %s taken concurrently (attempt %s)", event.slug, attempt + 1)
    raise DuplicateError("An event with this title is being created, please retry", error="DUPLICATE_SLUG")


# ------------------ Add New Event ------------------
async def add_event_controller(db: Session, event_data: dict) -> Event:
    def build():
        new_event = Event(**event_data)
        new_event.slug = unique_slug(db, new_event.title)
        new_event.registration_count = 0
        db.add(new_event)
        return new_event

    new_event = commit_with_unique_slug(db, build)
    db.refresh(new_event)

    logger.info("Event %s created with slug %s", new_event.id, new_event.slug)
    return new_event


# ------------------ Update Event ------------------
async def update_event_controller(db: Session, event_id: str, update_data: dict) -> Event:
    event = await retrieve_event_by_id(db, event_id)

    # registration_count only moves through registrations
    update_data.pop("registration_count", None)
    title_changed = "title" in update_data and update_data["title"] != event.title

    def build():
        for key, val in update_data.items():
            setattr(event, key, val)
        if title_changed:
            event.slug = unique_slug(db, event.title, event.id)
        return event

    commit_with_unique_slug(db, build)
    db.refresh(event)
    return event


# ------------------ Delete Event ------------------
async def delete_event_controller(db: Session, event_id: str) -> Event:
    event = await retrieve_event_by_id(db, event_id)
    db.delete(event)
    db.commit()

    logger.info("Event %s deleted", event.id)
    return event
