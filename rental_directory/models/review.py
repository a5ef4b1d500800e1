"""Review, contact submission and software interest models."""
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Float, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from rental_directory.database import Base


class Review(Base):
    __tablename__ = "Review"

    review_id = Column(Integer, primary_key=True, autoincrement=True)
    software_id = Column(Integer, ForeignKey("Software.software_id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(512), nullable=False)
    reviewer_name = Column(String(255), nullable=True)
    reviewer_email = Column(String(255), nullable=True)
    overall_rating = Column(Float, nullable=False)  # 1-5
    pros = Column(Text, nullable=False)
    cons = Column(Text, nullable=False)
    experience_description = Column(Text, nullable=True)
    category_ratings = Column(JSON, nullable=True)  # list of 1-5 scores, unrated categories dropped
    pricing_perception = Column(Integer, nullable=True)  # 20 per "$", 20-100
    recommendation_score = Column(Integer, nullable=True)  # 0-10
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    software = relationship("Software", back_populates="reviews")


class ContactSubmission(Base):
    __tablename__ = "ContactSubmission"

    submission_id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    company = Column(String(255), nullable=True)
    subject = Column(String(512), nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class SoftwareInterest(Base):
    __tablename__ = "SoftwareInterest"

    interest_id = Column(Integer, primary_key=True, autoincrement=True)
    software_name = Column(String(255), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    contact_number = Column(String(64), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
