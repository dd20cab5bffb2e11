#!/usr/bin/env python3
"""
Script to create database tables
Run this after the database is created to set up all tables
"""
import sys
import os

# Add the app directory to the path
app_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'app')
sys.path.insert(0, app_dir)

from clubhub.database import Base, store
from clubhub.models.user_model import User
from clubhub.models.event_model import Event
from clubhub.models.registration_model import EventRegistration
from clubhub.models.payment_model import Payment
from clubhub.models.member_model import Member
from clubhub.models.gallery_model import GalleryItem
from clubhub.models.testimonial_model import Testimonial
from clubhub.models.submission_model import Submission

def create_tables():
    """Create all database tables"""
    try:
        print("Creating database tables...")
        Base.metadata.create_all(bind=store.engine)
        print("Database tables created successfully!")
        return True
    except Exception as e:
        print(f"Error creating tables: {e}")
        return False

if __name__ == "__main__":
    sys.exit(0 if create_tables() else 1)
