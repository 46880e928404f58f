# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum


class TripStatus(str, Enum):
    """Trip status enumeration."""

    PLANNING = "planning"
    ACTIVE = "active"
    COMPLETED = "completed"


class TransportType(str, Enum):
    """Transportation type enumeration."""

    FLIGHT = "flight"
    BUS = "bus"
    TRAIN = "train"
    CAR = "car"
    BOAT = "boat"
    OTHER = "other"


class AccommodationType(str, Enum):
    """Accommodation type enumeration."""

    HOTEL = "hotel"
    HOSTEL = "hostel"
    AIRBNB = "airbnb"
    APARTMENT = "apartment"
    HOUSE = "house"
    OTHER = "other"


class ActivityCategory(str, Enum):
    """Activity category enumeration."""

    CULTURAL = "cultural"
    FOOD = "food"
    NATURE = "nature"
    ADVENTURE = "adventure"
    SHOPPING = "shopping"
    ENTERTAINMENT = "entertainment"
    OTHER = "other"


class BudgetCategory(str, Enum):
    """Budget category enumeration, shared by budget lines and expenses."""

    TRANSPORT = "transport"
    ACCOMMODATION = "accommodation"
    FOOD = "food"
    ACTIVITIES = "activities"
    SHOPPING = "shopping"
    EMERGENCY = "emergency"
    OTHER = "other"


class DocumentType(str, Enum):
    """Travel document type enumeration."""

    PASSPORT = "passport"
    VISA = "visa"
    TICKET = "ticket"
    RESERVATION = "reservation"
    INSURANCE = "insurance"
    OTHER = "other"


class NoteType(str, Enum):
    """Trip note type enumeration."""

    GENERAL = "general"
    IMPORTANT = "important"
    REMINDER = "reminder"
    IDEA = "idea"
