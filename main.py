import logging
import os
from typing import Any, List, Optional

from fastapi import Cookie, Depends, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, EmailStr

from accounts import ADMIN, DRIVER, RIDER, AccountKind, login, register
from bookings import confirm_booking
from context import AppContext, current_context, get_context, get_session_store
from errors import BadCredential, DatabaseNotConfigured, DuplicateAccount, NotFound, TripNotFound
from feedback import submit_feedback
from payments import process_payment
from repository import serialize
from sessions import SESSION_COOKIE, SessionStore, sign, unsign
from trips import create_trip, search_trips

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Travel Buddy API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class UserRegisterRequest(BaseModel):
    fullName: str
    phone: Optional[str] = None
    email: EmailStr
    pwd: str
    gender: Optional[str] = None
    preferredGender: Optional[str] = None


class UserLoginRequest(BaseModel):
    userEmail: str
    userPassword: str


class DriverRegisterRequest(BaseModel):
    driverName: str
    driverPhone: Optional[str] = None
    driverEmail: EmailStr
    driverPassword: str


class DriverLoginRequest(BaseModel):
    driverEmail: str
    driverPassword: str


class AdminLoginRequest(BaseModel):
    adminEmail: str
    adminPassword: str


class CreateTripRequest(BaseModel):
    ownerEmail: str
    fromLocation: str
    toLocation: str
    travelDate: str
    travelTime: str
    genderRestriction: Optional[str] = None
    estimatedFare: Optional[float] = None
    maxCompanions: Optional[int] = None


class ConfirmBookingRequest(BaseModel):
    tripId: str
    participantEmails: Optional[List[str]] = None


class PaymentRequest(BaseModel):
    bookingId: Any = None
    amount: Any = None
    paymentMethod: Any = None


class FeedbackRequest(BaseModel):
    userEmail: Optional[str] = None
    rating: Optional[float] = None
    comment: Optional[str] = None


def _server_error(message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=500, content={"serverMsg": message, **extra})


def _register(ctx: AppContext, kind: AccountKind, profile: dict, secret: str, error_message: str):
    try:
        register(ctx, kind, profile, secret)
    except DuplicateAccount as e:
        return {"serverMsg": e.message, "flag": False}
    except Exception:
        logger.exception("%s registration failed", kind.name)
        return _server_error(error_message, flag=False)
    return {"serverMsg": kind.registered_message, "flag": True}


def _login(
    ctx: AppContext,
    kind: AccountKind,
    email: str,
    secret: str,
    response: Response,
    session_cookie: Optional[str],
    error_message: str,
):
    try:
        account = login(ctx, kind, email, secret)
    except (NotFound, BadCredential) as e:
        return {"serverMsg": e.message, "loginStatus": False}
    except Exception:
        logger.exception("%s login failed", kind.name)
        return _server_error(error_message, loginStatus=False)

    # a client holds one session at a time
    previous_sid = unsign(session_cookie)
    if previous_sid:
        ctx.sessions.destroy(previous_sid)

    sid = ctx.sessions.create({"kind": kind.name, "email": account[kind.email_field]})
    response.set_cookie(SESSION_COOKIE, sign(sid), httponly=True)
    return {"serverMsg": kind.welcome_message, "loginStatus": True, kind.record_key: serialize(account)}


@app.exception_handler(DatabaseNotConfigured)
def database_not_configured(request: Request, exc: DatabaseNotConfigured):
    return JSONResponse(status_code=500, content={"serverMsg": exc.message})


@app.get("/")
def root():
    return {"message": "Travel Buddy API is running."}


@app.post("/userRegister")
def user_register(payload: UserRegisterRequest, ctx: AppContext = Depends(get_context)):
    profile = {
        "userName": payload.fullName,
        "userPhone": payload.phone,
        "userEmail": payload.email,
        "userGender": payload.gender,
        "preferredGender": payload.preferredGender or "any",
    }
    return _register(ctx, RIDER, profile, payload.pwd, "Registration error")


@app.post("/userLogin")
def user_login(
    payload: UserLoginRequest,
    response: Response,
    session_cookie: Optional[str] = Cookie(None, alias=SESSION_COOKIE),
    ctx: AppContext = Depends(get_context),
):
    return _login(ctx, RIDER, payload.userEmail, payload.userPassword, response, session_cookie, "Login error")


@app.post("/driverRegister")
def driver_register(payload: DriverRegisterRequest, ctx: AppContext = Depends(get_context)):
    profile = {
        "driverName": payload.driverName,
        "driverPhone": payload.driverPhone,
        "driverEmail": payload.driverEmail,
    }
    return _register(ctx, DRIVER, profile, payload.driverPassword, "Driver Registration error")


@app.post("/driverLogin")
def driver_login(
    payload: DriverLoginRequest,
    response: Response,
    session_cookie: Optional[str] = Cookie(None, alias=SESSION_COOKIE),
    ctx: AppContext = Depends(get_context),
):
    return _login(ctx, DRIVER, payload.driverEmail, payload.driverPassword, response, session_cookie, "Driver login error")


@app.post("/adminLogin")
def admin_login(
    payload: AdminLoginRequest,
    response: Response,
    session_cookie: Optional[str] = Cookie(None, alias=SESSION_COOKIE),
    ctx: AppContext = Depends(get_context),
):
    return _login(ctx, ADMIN, payload.adminEmail, payload.adminPassword, response, session_cookie, "Login error")


@app.post("/logout")
def logout(
    response: Response,
    session_cookie: Optional[str] = Cookie(None, alias=SESSION_COOKIE),
    sessions: SessionStore = Depends(get_session_store),
):
    sid = unsign(session_cookie)
    if sid:
        sessions.destroy(sid)
    response.delete_cookie(SESSION_COOKIE)
    return {"serverMsg": "Logged out successfully"}


@app.post("/createTrip")
def create_trip_endpoint(payload: CreateTripRequest, ctx: AppContext = Depends(get_context)):
    try:
        create_trip(ctx, payload.model_dump())
    except Exception:
        logger.exception("Trip creation failed")
        return _server_error("Trip creation error", flag=False)
    return {"serverMsg": "Trip created", "flag": True}


@app.get("/searchTrips")
def search_trips_endpoint(
    fromLocation: Optional[str] = None,
    toLocation: Optional[str] = None,
    gender: Optional[str] = None,
    ctx: AppContext = Depends(get_context),
):
    try:
        trips = search_trips(ctx, fromLocation, toLocation, gender)
    except Exception:
        logger.exception("Trip search failed")
        return _server_error("Search trips error")
    return [serialize(t) for t in trips]


@app.post("/confirmBooking")
def confirm_booking_endpoint(payload: ConfirmBookingRequest, ctx: AppContext = Depends(get_context)):
    try:
        booking = confirm_booking(ctx, payload.tripId, payload.participantEmails)
    except TripNotFound as e:
        return JSONResponse(status_code=404, content={"serverMsg": e.message})
    except Exception:
        logger.exception("Booking failed for trip %s", payload.tripId)
        return _server_error("Booking error")
    return {"serverMsg": "Booking confirmed", "booking": serialize(booking)}


@app.post("/processPayment")
def process_payment_endpoint(payload: Optional[PaymentRequest] = None):
    payload = payload or PaymentRequest()
    payment_info = process_payment(payload.bookingId, payload.amount, payload.paymentMethod)
    return {"serverMsg": "Payment successful", "paymentStatus": True, "paymentInfo": payment_info}


@app.post("/sendFeedback")
def send_feedback(payload: FeedbackRequest, ctx: AppContext = Depends(get_context)):
    try:
        submit_feedback(ctx, payload.userEmail, payload.rating, payload.comment)
    except Exception:
        logger.exception("Saving feedback failed")
        return _server_error("Feedback error")
    return {"serverMsg": "Feedback saved. Thank you!"}


@app.get("/test")
def test_database(ctx: AppContext = Depends(current_context)):
    """Report whether the store is configured and reachable. Never echoes connection details."""
    response = {
        "backend": "✅ Running",
        "database": "⚠️  Available but not initialized",
        "database_url": "✅ Set" if os.getenv("DATABASE_URL") else "❌ Not Set",
        "database_name": "✅ Set" if os.getenv("DATABASE_NAME") else "❌ Not Set",
        "connection_status": "Not Connected",
        "collections": [],
    }
    if ctx.database is None:
        return response

    try:
        response["collections"] = ctx.database.list_collection_names()[:10]
    except Exception as e:
        response["database"] = f"⚠️  Connected but Error: {str(e)[:50]}"
        return response

    response["database"] = "✅ Connected & Working"
    response["connection_status"] = "Connected"
    return response

if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 7500))
    uvicorn.run(app, host="0.0.0.0", port=port)
