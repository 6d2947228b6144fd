"""
Database Schemas for Travel Buddy

Each Pydantic model describes one MongoDB collection. The collection name is
the lowercase class name:
- User -> "user"
- Driver -> "driver"
- Admin -> "admin"
- Trip -> "trip"
- Booking -> "booking"
- Feedback -> "feedback"

Field names follow the documents the web client reads back (camelCase).
"""

from pydantic import BaseModel, Field
from typing import List, Literal, Optional

GenderRestriction = Literal["any", "male", "female"]


class User(BaseModel):
    """
    Riders. Collection name: "user"
    Passwords are stored as salted PBKDF2 hashes.
    """
    userName: str = Field(..., description="Full name")
    userPhone: Optional[str] = Field(None, description="Contact number")
    userEmail: str = Field(..., description="Email address, unique among riders")
    userPassword: str = Field(..., description="Password hash")
    userGender: Optional[str] = Field(None, description="Rider gender")
    preferredGender: str = Field("any", description="Preferred companion gender")


class Driver(BaseModel):
    """
    Taxi drivers. Collection name: "driver"
    """
    driverName: str = Field(..., description="Full name")
    driverPhone: Optional[str] = Field(None, description="Contact number")
    driverEmail: str = Field(..., description="Email address, unique among drivers")
    driverPassword: str = Field(..., description="Password hash")


class Admin(BaseModel):
    """
    Administrators, seeded out-of-band. Collection name: "admin"
    """
    adminName: str = Field(..., description="Full name")
    adminEmail: str = Field(..., description="Email address, unique among admins")
    adminPassword: str = Field(..., description="Password hash")


class Trip(BaseModel):
    """
    A shared ride posted by a rider. Collection name: "trip"
    """
    ownerEmail: str = Field(..., description="Email of the rider who posted the trip")
    fromLocation: str = Field(..., description="Departure location")
    toLocation: str = Field(..., description="Destination")
    travelDate: str = Field(..., description="Travel date as sent by the client")
    travelTime: str = Field(..., description="Travel time as sent by the client")
    genderRestriction: GenderRestriction = Field("any", description="Who may see this trip in search")
    estimatedFare: float = Field(0, description="Estimated fare for the whole trip")
    maxCompanions: int = Field(3, description="Maximum number of companions")


class Booking(BaseModel):
    """
    A confirmed booking of a trip. Collection name: "booking"
    Fares are copied from the trip at confirmation time.
    """
    tripId: str = Field(..., description="Trip document id")
    participantEmails: List[str] = Field(default_factory=list, description="Participants")
    totalFare: float = Field(0, description="Total fare")
    farePerPerson: float = Field(0, description="Fare per participant")
    status: Literal["confirmed"] = Field("confirmed", description="Booking status")


class Feedback(BaseModel):
    """
    Rating and comment left by a rider. Collection name: "feedback"
    Not range checked on the server.
    """
    userEmail: Optional[str] = Field(None, description="Email of the author")
    rating: Optional[float] = Field(None, description="Star rating, 1-5 in the client")
    comment: Optional[str] = Field(None, description="Free text comment")
