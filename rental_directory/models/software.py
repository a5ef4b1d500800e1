"""Software listing and its related feature, pricing and support models."""
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Float, Boolean, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from rental_directory.database import Base


class Software(Base):
    __tablename__ = "Software"

    software_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=False)
    ui_type = Column(JSON, nullable=True)  # list of strings, e.g. ["Web", "Mobile"]
    ui_description = Column(Text, nullable=True)
    platform_supported = Column(JSON, nullable=True)
    typical_customers = Column(JSON, nullable=True)
    content = Column(JSON, nullable=True)  # media URLs in object storage
    logo = Column(String(1024), nullable=True)
    free_trial = Column(Boolean, nullable=False, default=False)
    free_version = Column(Boolean, nullable=False, default=False)
    user_id = Column(String(255), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    features = relationship("Feature", back_populates="software", cascade="all, delete-orphan")
    pricing_plans = relationship("PricingPlan", back_populates="software", cascade="all, delete-orphan")
    support_options = relationship("SupportOption", back_populates="software", cascade="all, delete-orphan")
    reviews = relationship("Review", back_populates="software", cascade="all, delete-orphan")


class Feature(Base):
    __tablename__ = "Feature"

    feature_id = Column(Integer, primary_key=True, autoincrement=True)
    software_id = Column(Integer, ForeignKey("Software.software_id", ondelete="CASCADE"), nullable=False, index=True)
    feature_name = Column(String(255), nullable=False)
    feature_description = Column(Text, nullable=True)

    software = relationship("Software", back_populates="features")


class PricingPlan(Base):
    __tablename__ = "PricingPlan"

    plan_id = Column(Integer, primary_key=True, autoincrement=True)
    software_id = Column(Integer, ForeignKey("Software.software_id", ondelete="CASCADE"), nullable=False, index=True)
    plan_name = Column(String(255), nullable=False)
    cost = Column(Float, nullable=True)  # monthly; NULL = contact vendor, 0 = free
    included_features = Column(Text, nullable=True)
    payment_options = Column(JSON, nullable=True)  # e.g. ["Subscription", "One time"]

    software = relationship("Software", back_populates="pricing_plans")


class SupportOption(Base):
    __tablename__ = "SupportOption"

    support_id = Column(Integer, primary_key=True, autoincrement=True)
    software_id = Column(
        Integer, ForeignKey("Software.software_id", ondelete="CASCADE"), nullable=False, unique=True, index=True
    )
    channels = Column(JSON, nullable=True)
    hours = Column(JSON, nullable=True)
    training_options = Column(JSON, nullable=True)
    self_help_resources = Column(Boolean, nullable=False, default=False)

    software = relationship("Software", back_populates="support_options")
