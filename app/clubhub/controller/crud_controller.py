"""Create/read/update/delete shared by members, gallery, testimonials and submissions."""
import logging

from sqlalchemy.orm import Session

from clubhub.exceptions import NotFoundError

logger = logging.getLogger(__name__)

MAX_ID = 2 ** 63 - 1


def parse_id(value):
    """Primary key for an ASCII digit string in BIGINT range, else None."""
    value = str(value or "")
    if not (value.isascii() and value.isdigit()):
        return None
    number = int(value)
    return number if number <= MAX_ID else None


def _label(model) -> str:
    return getattr(model, "__label__", model.__name__)


# ------------------ Add Item ------------------
async def add_item(db: Session, model, data: dict):
    item = model(**data)
    db.add(item)
    db.commit()
    db.refresh(item)
    logger.info("%s %s created", _label(model), item.id)
    return item


# ------------------ Retrieve Items ------------------
async def retrieve_items(db: Session, model, order_by=None, **filters):
    query = db.query(model)
    for key, val in filters.items():
        query = query.filter(getattr(model, key) == val)
    if order_by is not None:
        query = query.order_by(*order_by) if isinstance(order_by, (list, tuple)) else query.order_by(order_by)
    return query.all()


async def retrieve_item(db: Session, model, item_id: str):
    item = None
    pk = parse_id(item_id)
    if pk is not None:
        item = db.query(model).filter(model.id == pk).first()
    if not item:
        raise NotFoundError(f"{_label(model)} not found")
    return item


# ------------------ Update Item ------------------
async def update_item(db: Session, model, item_id: str, update_data: dict):
    item = await retrieve_item(db, model, item_id)
    for key, val in update_data.items():
        setattr(item, key, val)
    db.commit()
    db.refresh(item)
    return item


# ------------------ Delete Item ------------------
async def delete_item(db: Session, model, item_id: str):
    item = await retrieve_item(db, model, item_id)
    db.delete(item)
    db.commit()
    logger.info("%s %s deleted", _label(model), item_id)
    return item
