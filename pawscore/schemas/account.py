"""
Account, session and notification records.

``Account`` holds the identity fields shared by every kind of user and is
embedded in ``User`` and ``Veterinarian`` rather than inherited.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field, EmailStr

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")


class UserRole(str, Enum):
    """Platform roles."""
    ADMIN = "admin"
    USER = "user"
    DOCTOR = "doctor"


class NotificationType(str, Enum):
    """Delivery channel."""
    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"
    WEBHOOK = "webhook"


class NotificationStatus(str, Enum):
    """Delivery lifecycle status."""
    PENDING = "pending"
    PROCESSING = "processing"
    SENT = "sent"
    DELIVERED = "delivered"
    FAILED = "failed"
    CANCELLED = "cancelled"


class NotificationPriority(str, Enum):
    """Delivery priority."""
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


class Account(BaseModel):
    """Identity fields shared by users and staff."""

    account_id: str = Field(..., description="Unique account identifier")
    email: EmailStr = Field(..., description="Login email address")
    password_hash: str = Field(default="", description="Hashed password, never the plain text")
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
    deleted_at: Optional[datetime] = Field(default=None)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def is_deleted(self) -> bool:
        return self.deleted_at is not None


class User(BaseModel):
    """Platform user (adopter, admin or doctor login)."""

    account: Account
    username: Optional[str] = Field(default=None, max_length=100)
    role: UserRole = Field(default=UserRole.USER)
    is_verified: bool = Field(default=False)
    verification_code: Optional[str] = Field(default=None)
    avatar_url: Optional[str] = Field(default=None)

    # Authentication state
    last_login_at: Optional[datetime] = Field(default=None)
    login_attempts: int = Field(default=0, ge=0)
    locked_until: Optional[datetime] = Field(default=None)
    reset_password_token: Optional[str] = Field(default=None)
    reset_password_expires: Optional[datetime] = Field(default=None)

    def is_locked(self, as_of: Optional[datetime] = None) -> bool:
        """Check whether the account is locked out at the given moment."""
        now = as_of or datetime.utcnow()
        return self.locked_until is not None and self.locked_until > now


class UserSession(BaseModel):
    """An authenticated session for a user or staff member."""

    session_id: str
    user_id: str
    source_table: str = Field(..., description="Record type the session belongs to")
    user_email: EmailStr
    user_role: str
    refresh_token: str

    device_id: Optional[str] = None
    device_name: Optional[str] = None
    device_type: Optional[str] = Field(default=None, description="desktop, mobile or tablet")
    browser: Optional[str] = None
    browser_version: Optional[str] = None
    os: Optional[str] = None
    os_version: Optional[str] = None
    ip_address: Optional[str] = None
    location: Optional[str] = None

    is_active: bool = Field(default=True)
    last_activity: Optional[datetime] = None
    expires_at: datetime
    revoked_at: Optional[datetime] = None
    revoked_reason: Optional[str] = Field(
        default=None,
        description="logout, expired, suspicious_activity or user_request"
    )

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    def is_expired(self, as_of: Optional[datetime] = None) -> bool:
        return (as_of or datetime.utcnow()) > self.expires_at

    def is_usable(self, as_of: Optional[datetime] = None) -> bool:
        """An active, unrevoked and unexpired session."""
        return self.is_active and self.revoked_at is None and not self.is_expired(as_of)

    def revoke(self, reason: str, when: Optional[datetime] = None) -> None:
        self.is_active = False
        self.revoked_at = when or datetime.utcnow()
        self.revoked_reason = reason


class NotificationAttempt(BaseModel):
    """One delivery attempt in a notification's history."""

    attempt: int = Field(..., ge=1)
    timestamp: datetime
    status: str
    error: Optional[str] = None
    response: Optional[Any] = None


class Notification(BaseModel):
    """An outbound notification and its delivery state."""

    notification_id: str
    type: NotificationType
    status: NotificationStatus = Field(default=NotificationStatus.PENDING)
    priority: NotificationPriority = Field(default=NotificationPriority.NORMAL)
    recipient: str = Field(..., description="Email, phone number, device token or URL")
    user_id: Optional[str] = None
    subject: str = ""
    content: str = ""
    data: Optional[Dict[str, Any]] = None
    template_id: Optional[str] = None
    language: str = Field(default="es")
    channel_metadata: Optional[Dict[str, Any]] = None

    scheduled_at: Optional[datetime] = None
    sent_at: Optional[datetime] = None
    delivered_at: Optional[datetime] = None

    attempts: int = Field(default=0, ge=0)
    max_attempts: int = Field(default=3, ge=0)
    error_message: Optional[str] = None
    attempt_history: List[NotificationAttempt] = Field(default_factory=list)

    external_id: Optional[str] = None
    provider_response: Optional[Dict[str, Any]] = None
    provider: Optional[str] = None
    cost: Optional[float] = None
    currency: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    campaign: Optional[str] = None

    requires_confirmation: bool = Field(default=False)
    confirmed_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    def is_expired(self, as_of: Optional[datetime] = None) -> bool:
        if self.expires_at is None:
            return False
        return (as_of or datetime.utcnow()) > self.expires_at

    def can_retry(self, as_of: Optional[datetime] = None) -> bool:
        """A failed notification may be retried while attempts remain and it has not expired."""
        return (
            self.attempts < self.max_attempts
            and self.status == NotificationStatus.FAILED
            and not self.is_expired(as_of)
        )

    def add_attempt(
        self,
        status: str,
        error: Optional[str] = None,
        response: Optional[Any] = None,
        when: Optional[datetime] = None,
    ) -> None:
        self.attempts += 1
        self.attempt_history.append(
            NotificationAttempt(
                attempt=self.attempts,
                timestamp=when or datetime.utcnow(),
                status=status,
                error=error,
                response=response,
            )
        )

    def mark_as_sent(
        self,
        external_id: Optional[str] = None,
        provider_response: Optional[Dict[str, Any]] = None,
        when: Optional[datetime] = None,
    ) -> None:
        self.status = NotificationStatus.SENT
        self.sent_at = when or datetime.utcnow()
        if external_id:
            self.external_id = external_id
        if provider_response:
            self.provider_response = provider_response

    def mark_as_delivered(self, when: Optional[datetime] = None) -> None:
        self.status = NotificationStatus.DELIVERED
        self.delivered_at = when or datetime.utcnow()

    def mark_as_failed(self, error: str) -> None:
        self.status = NotificationStatus.FAILED
        self.error_message = error

    def mark_as_confirmed(self, when: Optional[datetime] = None) -> None:
        self.confirmed_at = when or datetime.utcnow()


class NotificationTemplate(BaseModel):
    """Reusable notification content with placeholder variables."""

    template_id: str
    name: str
    type: NotificationType
    subject: str
    content: str
    language: str = Field(default="en")
    variables: Optional[Dict[str, Any]] = None
    is_active: bool = Field(default=True)
    version: str = Field(default="1.0.0")

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    def render(self, values: Dict[str, Any]) -> tuple[str, str]:
        """
        Fill ``{placeholder}`` variables in subject and content.

        Placeholders without a value and any other braces are left as written.

        Args:
            values: Placeholder values

        Returns:
            Tuple of (subject, content)
        """
        merged = {**(self.variables or {}), **values}

        def substitute(match: re.Match) -> str:
            name = match.group(1)
            return str(merged[name]) if name in merged else match.group(0)

        return PLACEHOLDER_PATTERN.sub(substitute, self.subject), PLACEHOLDER_PATTERN.sub(substitute, self.content)
