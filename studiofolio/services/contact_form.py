# studiofolio/services/contact_form.py
"""
Contact form submission.

The form posts to a third-party form backend. Two payload shapes are
supported:
- multipart: provider-specific field names (e.g. Google Forms "entry.NNN")
- json: {"name", "email", "phone", "service", "message", "subject"}

ContactFormController owns the Idle -> Submitting -> Success/Failure cycle;
the transport only encodes and sends.
"""

import asyncio
import http.client
import json
import logging
import urllib.error
import urllib.request
import uuid
from enum import Enum
from typing import Callable, Mapping, Optional, Protocol

from studiofolio.models.types import ContactFormData, SubmissionResult
from studiofolio.services.exceptions import ConfigurationError, SubmissionFailure
from studiofolio.services.scheduler import Scheduler, TimerHandle
from studiofolio.ui.state import AppState, SubmitState

logger = logging.getLogger(__name__)

DEFAULT_SUCCESS_MESSAGE_SECONDS = 5.0
DEFAULT_REQUIRED_FIELDS: tuple[str, ...] = ("name", "email", "message")

SUCCESS_MESSAGE = "Thank you! We'll be in touch soon."
FAILURE_MESSAGE = "Something went wrong. Please try again."
MISSING_FIELDS_MESSAGE = "Please fill in: {fields}"

USER_AGENT = "Studiofolio-ContactForm/1.0"


class FormEncoding(Enum):
    """Payload shape expected by the form endpoint"""
    MULTIPART = "multipart"
    JSON = "json"


def build_subject(name: str) -> str:
    """Subject line for JSON providers, derived from the sender's name"""
    return f"New contact from {name.strip() or 'website visitor'}"


def encode_multipart(fields: Mapping[str, str], boundary: Optional[str] = None) -> tuple[bytes, str]:
    """Encode fields as multipart/form-data.

    Returns:
        (body, content_type)
    """
    boundary = boundary or f"----studiofolio{uuid.uuid4().hex}"
    lines: list[bytes] = []
    for name, value in fields.items():
        lines.append(f"--{boundary}".encode("utf-8"))
        lines.append(f'Content-Disposition: form-data; name="{name}"'.encode("utf-8"))
        lines.append(b"")
        lines.append(value.encode("utf-8"))
    lines.append(f"--{boundary}--".encode("utf-8"))
    lines.append(b"")
    return b"\r\n".join(lines), f"multipart/form-data; boundary={boundary}"


def map_multipart_fields(data: ContactFormData, field_map: Mapping[str, str]) -> dict[str, str]:
    """Rename form fields to the provider's field names.

    Fields without a mapping are not sent.
    """
    values = data.to_dict()
    return {provider_name: values[field] for field, provider_name in field_map.items() if field in values}


def build_json_payload(data: ContactFormData, access_key: str = "") -> dict[str, str]:
    payload = {
        "name": data.name,
        "email": data.email,
        "phone": data.phone,
        "service": data.service,
        "message": data.message,
        "subject": build_subject(data.name),
    }
    if access_key:
        payload["access_key"] = access_key
    return payload


class FormTransport(Protocol):
    async def submit(self, data: ContactFormData) -> Optional[int]:
        """Send one submission. Returns the HTTP status; raises SubmissionFailure."""
        ...


class HttpFormTransport:
    """
    POSTs the form with urllib in a worker thread.

    Any 2xx status is success. With `optimistic_success` the response status
    is not inspected (fire-and-forget providers); transport errors still fail.
    """

    def __init__(
        self,
        endpoint: str,
        encoding: FormEncoding = FormEncoding.MULTIPART,
        field_map: Optional[Mapping[str, str]] = None,
        access_key: str = "",
        timeout: float = 15.0,
        optimistic_success: bool = False,
    ):
        if not endpoint:
            raise ConfigurationError("Contact form endpoint is not configured")
        if encoding == FormEncoding.MULTIPART and not field_map:
            raise ConfigurationError("Multipart form encoding requires a field map")
        self.endpoint = endpoint
        self.encoding = encoding
        self.field_map = dict(field_map or {})
        self.access_key = access_key
        self.timeout = timeout
        self.optimistic_success = optimistic_success

    def build_request(self, data: ContactFormData) -> urllib.request.Request:
        headers = {"User-Agent": USER_AGENT}
        if self.encoding == FormEncoding.JSON:
            body = json.dumps(build_json_payload(data, self.access_key), ensure_ascii=False).encode("utf-8")
            headers["Content-Type"] = "application/json"
            headers["Accept"] = "application/json"
        else:
            body, content_type = encode_multipart(map_multipart_fields(data, self.field_map))
            headers["Content-Type"] = content_type
        return urllib.request.Request(self.endpoint, data=body, headers=headers, method="POST")

    def send(self, data: ContactFormData) -> Optional[int]:
        """Blocking send. Returns the HTTP status.

        Raises:
            SubmissionFailure: network error, or non-2xx status (unless optimistic)
        """
        request = self.build_request(data)
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                status = response.status
        except urllib.error.HTTPError as e:
            if self.optimistic_success:
                logger.info("Form endpoint returned HTTP %d (ignored, optimistic success)", e.code)
                return e.code
            raise SubmissionFailure(f"Form endpoint returned HTTP {e.code}", status=e.code) from e
        except urllib.error.URLError as e:
            raise SubmissionFailure(f"Network error: {e.reason}") from e
        except OSError as e:
            # Socket timeouts and connection resets
            raise SubmissionFailure(f"Network error: {e}") from e
        except http.client.HTTPException as e:
            # Malformed or truncated reply (BadStatusLine, IncompleteRead)
            raise SubmissionFailure(f"Invalid response from form endpoint: {e!r}") from e

        if not self.optimistic_success and not 200 <= status < 300:
            raise SubmissionFailure(f"Form endpoint returned HTTP {status}", status=status)
        return status

    async def submit(self, data: ContactFormData) -> Optional[int]:
        return await asyncio.to_thread(self.send, data)


class ContactFormController:
    """
    Submission state machine for the contact form.

        IDLE -> SUBMITTING -> SUCCESS -> (after success_message_seconds) IDLE
                           -> FAILURE -> IDLE  (input kept for a retry)

    At most one request is in flight; submits during SUBMITTING are ignored.
    No automatic retries.
    """

    def __init__(
        self,
        state: AppState,
        transport: FormTransport,
        scheduler: Scheduler,
        success_message_seconds: float = DEFAULT_SUCCESS_MESSAGE_SECONDS,
        required_fields: tuple[str, ...] = DEFAULT_REQUIRED_FIELDS,
    ):
        self.state = state
        self.transport = transport
        self.scheduler = scheduler
        self.success_message_seconds = success_message_seconds
        self.required_fields = required_fields
        self._clear_timer: Optional[TimerHandle] = None
        self._listeners: list[Callable[[SubmitState], None]] = []

    @property
    def submit_state(self) -> SubmitState:
        return self.state.submit_state

    def on_change(self, callback: Callable[[SubmitState], None]) -> None:
        self._listeners.append(callback)

    def update_field(self, field_name: str, value: str) -> None:
        self.state.form.update(field_name, value)

    async def submit(self) -> Optional[SubmissionResult]:
        """Submit the current form data.

        Returns:
            SubmissionResult, or None if rejected because a submission is in flight
        """
        if self.state.submit_state == SubmitState.SUBMITTING:
            logger.info("Submit ignored: a submission is already in flight")
            return None

        missing = self.state.form.missing(self.required_fields)
        if missing:
            self._show_message(MISSING_FIELDS_MESSAGE.format(fields=", ".join(missing)), is_error=True)
            self._set_state(SubmitState.IDLE)
            return SubmissionResult.failure(f"missing fields: {', '.join(missing)}")

        self._cancel_clear_timer()
        self.state.submit_message = ""
        self._set_state(SubmitState.SUBMITTING)

        # Snapshot so keystrokes during the request do not change the payload
        payload = ContactFormData(**self.state.form.to_dict())
        try:
            status = await self.transport.submit(payload)
        except SubmissionFailure as e:
            logger.warning("Contact form submission failed: %s", e.reason)
            self._fail()
            return SubmissionResult.failure(e.reason, e.status)
        except Exception:
            logger.exception("Unexpected error during contact form submission")
            self._fail()
            raise

        logger.info("Contact form submitted (status=%s)", status)
        self.state.form.clear()
        self._show_message(SUCCESS_MESSAGE, is_error=False)
        self._set_state(SubmitState.SUCCESS)
        self._schedule_clear()
        return SubmissionResult.success(status)

    def teardown(self) -> None:
        self._cancel_clear_timer()

    def _fail(self) -> None:
        self._show_message(FAILURE_MESSAGE, is_error=True)
        self._set_state(SubmitState.FAILURE)
        # Failure is transient: allow an immediate retry
        self._set_state(SubmitState.IDLE)
        self._schedule_clear()

    def _schedule_clear(self) -> None:
        self._cancel_clear_timer()
        self._clear_timer = self.scheduler.call_later(self.success_message_seconds, self._clear_message)

    def _clear_message(self) -> None:
        self._clear_timer = None
        self.state.submit_message = ""
        self.state.submit_message_is_error = False
        if self.state.submit_state == SubmitState.SUCCESS:
            self._set_state(SubmitState.IDLE)
        else:
            self._notify()

    def _cancel_clear_timer(self) -> None:
        if self._clear_timer is not None:
            self._clear_timer.cancel()
            self._clear_timer = None

    def _show_message(self, message: str, is_error: bool) -> None:
        self.state.submit_message = message
        self.state.submit_message_is_error = is_error

    def _set_state(self, submit_state: SubmitState) -> None:
        self.state.submit_state = submit_state
        self._notify()

    def _notify(self) -> None:
        for callback in self._listeners:
            callback(self.state.submit_state)


def create_transport(settings) -> HttpFormTransport:
    """Build the HTTP transport from AppSettings.

    Raises:
        ConfigurationError: endpoint or encoding settings are unusable
    """
    try:
        encoding = FormEncoding(settings.form_encoding)
    except ValueError as e:
        raise ConfigurationError(f"Unknown form_encoding: {settings.form_encoding!r}") from e
    return HttpFormTransport(
        endpoint=settings.require_form_endpoint(),
        encoding=encoding,
        field_map=settings.form_field_map,
        access_key=settings.form_access_key,
        timeout=settings.request_timeout,
        optimistic_success=settings.optimistic_success,
    )
