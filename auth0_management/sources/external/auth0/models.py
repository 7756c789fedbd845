from enum import Enum
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field  # type: ignore


class TriggerId(str, Enum):
    POST_LOGIN = "post-login"
    CREDENTIALS_EXCHANGE = "credentials-exchange"
    PRE_USER_REGISTRATION = "pre-user-registration"
    POST_USER_REGISTRATION = "post-user-registration"
    POST_CHANGE_PASSWORD = "post-change-password"
    SEND_PHONE_MESSAGE = "send-phone-message"
    IGA_APPROVAL = "iga-approval"
    IGA_CERTIFICATION = "iga-certification"
    IGA_FULFILLMENT_ASSIGNMENT = "iga-fulfillment-assignment"
    IGA_FULFILLMENT_EXECUTION = "iga-fulfillment-execution"


class HookTriggerId(str, Enum):
    CREDENTIALS_EXCHANGE = "credentials-exchange"
    PRE_USER_REGISTRATION = "pre-user-registration"
    POST_USER_REGISTRATION = "post-user-registration"
    POST_CHANGE_PASSWORD = "post-change-password"
    SEND_PHONE_MESSAGE = "send-phone-message"


_IDENTITY_PROVIDERS = [
    "ad", "adfs", "amazon", "apple", "dropbox", "bitbucket", "aol", "auth0-oidc", "auth0",
    "baidu", "bitly", "box", "custom", "daccount", "dwolla", "email", "evernote-sandbox",
    "evernote", "exact", "facebook", "fitbit", "flickr", "github", "google-apps",
    "google-oauth2", "instagram", "ip", "line", "linkedin", "miicard", "oauth1", "oauth2",
    "office365", "oidc", "okta", "paypal", "paypal-sandbox", "pingfederate", "planningcenter",
    "renren", "salesforce-community", "salesforce-sandbox", "salesforce", "samlp",
    "sharepoint", "shopify", "sms", "soundcloud", "thecity-sandbox", "thecity",
    "thirtysevensignals", "twitter", "untappd", "vkontakte", "waad", "weibo", "windowslive",
    "wordpress", "yahoo", "yammer", "yandex",
]


def _member_name(value: str) -> str:
    return value.upper().replace("-", "_")


# Member names are the wire values upper-cased, e.g. ConnectionStrategy.GOOGLE_OAUTH2
ConnectionStrategy = Enum(  # type: ignore[misc]
    "ConnectionStrategy",
    [(_member_name(v), v) for v in _IDENTITY_PROVIDERS + ["auth0-adldap"]],
    type=str,
)
UserIdentityProvider = Enum(  # type: ignore[misc]
    "UserIdentityProvider",
    [(_member_name(v), v) for v in _IDENTITY_PROVIDERS],
    type=str,
)


class DeviceCredentialType(str, Enum):
    PUBLIC_KEY = "public_key"
    REFRESH_TOKEN = "refresh_token"
    ROTATING_REFRESH_TOKEN = "rotating_refresh_token"


class EmailTemplateName(str, Enum):
    VERIFY_EMAIL = "verify_email"
    VERIFY_EMAIL_BY_CODE = "verify_email_by_code"
    RESET_EMAIL = "reset_email"
    WELCOME_EMAIL = "welcome_email"
    BLOCKED_ACCOUNT = "blocked_account"
    STOLEN_CREDENTIALS = "stolen_credentials"
    ENROLLMENT_EMAIL = "enrollment_email"
    MFA_OOB_CODE = "mfa_oob_code"
    USER_INVITATION = "user_invitation"
    CHANGE_PASSWORD = "change_password"
    PASSWORD_RESET = "password_reset"


class GuardianFactorName(str, Enum):
    PUSH_NOTIFICATION = "push-notification"
    SMS = "sms"
    EMAIL = "email"
    DUO = "duo"
    OTP = "otp"
    WEBAUTHN_ROAMING = "webauthn-roaming"
    WEBAUTHN_PLATFORM = "webauthn-platform"
    RECOVERY_CODE = "recovery-code"


PromptName = Enum(  # type: ignore[misc]
    "PromptName",
    [
        (_member_name(v), v)
        for v in (
            "login", "login-id", "login-password", "login-passwordless",
            "login-email-verification", "signup", "signup-id", "signup-password",
            "reset-password", "consent", "logout", "mfa-push", "mfa-otp", "mfa-voice",
            "mfa-phone", "mfa-webauthn", "mfa-sms", "mfa-email", "mfa-recovery-code", "mfa",
            "status", "device-flow", "email-verification", "email-otp-challenge",
            "organizations", "invitation", "common",
        )
    ],
    type=str,
)

PromptLanguage = Enum(  # type: ignore[misc]
    "PromptLanguage",
    [
        (_member_name(v), v)
        for v in (
            "ar", "bg", "bs", "cs", "da", "de", "el", "en", "es", "et", "fi", "fr", "fr-CA",
            "fr-FR", "he", "hi", "hr", "hu", "id", "is", "it", "ja", "ko", "lt", "lv", "nb",
            "nl", "pl", "pt", "pt-BR", "pt-PT", "ro", "ru", "sk", "sl", "sr", "sv", "th", "tr",
            "uk", "vi", "zh-CN", "zh-TW",
        )
    ],
    type=str,
)


class MultifactorProvider(str, Enum):
    DUO = "duo"
    GOOGLE_AUTHENTICATOR = "google-authenticator"


class SearchEngineVersion(str, Enum):
    V1 = "v1"
    V2 = "v2"
    V3 = "v3"


class ManagementApiErrorPayload(BaseModel):
    """Structured error body returned by the Management API"""
    model_config = ConfigDict(populate_by_name=True)

    error_code: Optional[str] = Field(default=None, alias="errorCode")
    error: Optional[str] = None
    message: Optional[str] = None
    status_code: Optional[int] = Field(default=None, alias="statusCode")


class Page(BaseModel):
    """A list response with its pagination metadata

    ``kind`` tells which envelope the server sent: a bare ``list``, an
    ``offset`` envelope (start/limit/total) or a ``checkpoint`` envelope
    (next).
    """
    kind: Literal["list", "offset", "checkpoint"]
    items: List[Any] = Field(default_factory=list)
    start: Optional[int] = None
    limit: Optional[int] = None
    total: Optional[int] = None
    next: Optional[str] = None

    @property
    def has_next(self) -> bool:
        if self.kind == "checkpoint":
            return bool(self.next)
        if self.kind == "offset" and self.total is not None and self.start is not None:
            return self.start + len(self.items) < self.total
        return False


def parse_paginated(data: Any, key: str) -> Page:
    """Normalise a list endpoint response into a Page

    Args:
        data: Parsed JSON response
        key: Name of the list inside an envelope, e.g. "users" or "roles"
    Raises:
        ValueError: The response is neither a list nor an envelope holding ``key``
    """
    if isinstance(data, list):
        return Page(kind="list", items=data)
    if not isinstance(data, dict) or not isinstance(data.get(key), list):
        raise ValueError(f"Response is not a list or an envelope with '{key}'")
    # The last checkpoint page may omit "next"
    if "total" not in data and "start" not in data:
        return Page(kind="checkpoint", items=data[key], next=data.get("next"), limit=data.get("limit"))
    return Page(
        kind="offset",
        items=data[key],
        start=data.get("start"),
        limit=data.get("limit"),
        total=data.get("total"),
    )
