from sqlalchemy import Column, Integer, String, Text, DateTime
from datetime import datetime
from clubhub.database import Base

class GalleryItem(Base):
    __tablename__ = "gallery"
    __label__ = "Gallery item"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    image_url = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
