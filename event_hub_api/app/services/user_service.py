"""
Business logic for users.

Handles signup, credential checks and profile reads/updates.  The
stored ``password`` is always a bcrypt hash and is stripped from every
value this service returns.
"""

import logging

from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from event_hub_api.app.core.db import USERS, parse_object_id, serialize_document
from event_hub_api.app.core.errors import BadRequestError, ConflictError, NotFoundError
from event_hub_api.app.core.security import hash_password, is_new_password, verify_password
from event_hub_api.app.schemas.user import UserCreate, UserRead, UserUpdate


logger = logging.getLogger(__name__)

# Projection excluding the hash from reads.
WITHOUT_PASSWORD = {"password": 0}


class UserService:
    """Service for user accounts."""

    @classmethod
    def create_user(cls, db: Database, data: UserCreate) -> UserRead:
        """Register a new user.

        Raises ``ConflictError`` when the e‑mail is already taken, either
        by the existence check or by the unique index if another signup
        for the same address won the race.
        """
        users = db[USERS]
        if users.find_one({"email": data.email}, {"_id": 1}):
            logger.warning("Signup rejected, %s already registered", data.email)
            raise ConflictError("User already exists")
        doc = {
            "name": data.name,
            "email": data.email,
            "password": hash_password(data.password),
        }
        try:
            result = users.insert_one(doc)
        except DuplicateKeyError as exc:
            raise ConflictError("User already exists") from exc
        logger.info("Registered user %s", data.email)
        return UserRead(id=str(result.inserted_id), name=data.name, email=data.email)

    @classmethod
    def authenticate(cls, db: Database, email: str, password: str) -> UserRead:
        """Check credentials and return the user without its hash."""
        user = db[USERS].find_one({"email": email})
        if not user:
            raise BadRequestError("User not found")
        if not verify_password(password, user.get("password", "")):
            logger.info("Failed login for %s", email)
            raise BadRequestError("Incorrect password")
        return UserRead(id=str(user["_id"]), name=user["name"], email=user["email"])

    @classmethod
    def get_user(cls, db: Database, user_id: str) -> UserRead:
        oid = parse_object_id(user_id)
        user = db[USERS].find_one({"_id": oid}, WITHOUT_PASSWORD) if oid else None
        if not user:
            raise NotFoundError("User not found")
        return UserRead.model_validate(serialize_document(user))

    @classmethod
    def update_user(cls, db: Database, user_id: str, data: UserUpdate) -> UserRead:
        """Apply a profile update.

        Only fields present in the request are written.  The password is
        re-hashed only when a real new value is supplied.
        """
        oid = parse_object_id(user_id)
        if oid is None:
            raise NotFoundError("User not found")
        updates = {}
        if data.name is not None:
            updates["name"] = data.name
        if data.email is not None:
            updates["email"] = data.email
        if is_new_password(data.password):
            updates["password"] = hash_password(data.password)

        users = db[USERS]
        try:
            if updates:
                user = users.find_one_and_update(
                    {"_id": oid},
                    {"$set": updates},
                    projection=WITHOUT_PASSWORD,
                    return_document=ReturnDocument.AFTER,
                )
            else:
                user = users.find_one({"_id": oid}, WITHOUT_PASSWORD)
        except DuplicateKeyError as exc:
            raise ConflictError("Email already in use") from exc
        if not user:
            raise NotFoundError("User not found")
        logger.info("Updated user %s (%s)", user_id, ", ".join(sorted(updates)) or "no changes")
        return UserRead.model_validate(serialize_document(user))

    @classmethod
    def set_password(cls, db: Database, email: str, password: str) -> bool:
        """Replace the password hash of the user with ``email``.

        Returns ``False`` if no such user exists.
        """
        result = db[USERS].update_one({"email": email}, {"$set": {"password": hash_password(password)}})
        if result.matched_count:
            logger.info("Password reset for %s", email)
        return bool(result.matched_count)
