from __future__ import annotations

import logging
from typing import Optional

from barcode_scanner.app.dto import SubmissionResult
from barcode_scanner.app.session import SessionStore
from barcode_scanner.config.settings import Settings
from barcode_scanner.domain.errors import (
    ApplicationError,
    ConfigError,
    InvalidEndpointError,
    ProtocolError,
    TransportError,
)
from barcode_scanner.domain.models import (
    Endpoint,
    Failure,
    FailureKind,
    HistoryEntry,
    Loading,
    Success,
)
from barcode_scanner.domain.responses import ArticleFound, ArticleNotFound, decode_reply
from barcode_scanner.ports.config_store import ServerConfigRepository
from barcode_scanner.ports.dispatcher import TaskDispatcher
from barcode_scanner.ports.transport import SubmissionTransport

logger = logging.getLogger(__name__)

MSG_CONFIGURE_SERVER = "configure server address"
MSG_INVALID_CONFIG = "invalid server configuration"
MSG_INVALID_RESPONSE = "invalid response"


class ScanSubmitter:
    """
    Drives one submission attempt per scanned code.

    submit() runs in the session context: it validates the server address,
    publishes Loading and hands the request to the dispatcher. The request
    itself (attempt) runs off the session context and only builds a
    SubmissionResult; the dispatcher delivers it back and complete() applies
    outcome + history in one step.
    """

    def __init__(
            self,
            store: SessionStore,
            config_repo: ServerConfigRepository,
            transport: SubmissionTransport,
            dispatcher: TaskDispatcher,
            settings: Settings,
    ) -> None:
        self._store = store
        self._config_repo = config_repo
        self._transport = transport
        self._dispatcher = dispatcher
        self._settings = settings

    def submit(self, code: str) -> bool:
        current = self._store.outcome
        if isinstance(current, Loading):
            logger.info("Not submitting %s: %s still in flight", code, current.code)
            return False

        endpoint = self._preflight(code)
        if endpoint is None:
            return False

        self._store.publish(Loading(code))
        logger.info("Submitting %s to %s", code, endpoint)

        self._dispatcher.dispatch(
            lambda: self.attempt(code, endpoint),
            self.complete,
            lambda exc: self._complete_unexpected(code, exc),
        )
        return True

    def _preflight(self, code: str) -> Optional[Endpoint]:
        config = self._config_repo.load()
        try:
            return config.validate(self._settings.submit_path)
        except ConfigError as e:
            message = MSG_INVALID_CONFIG if isinstance(e, InvalidEndpointError) else MSG_CONFIGURE_SERVER
            logger.warning("Not submitting %s: %s", code, e)
            self._store.publish(Failure(code, message, FailureKind.CONFIG))
            return None

    def attempt(self, code: str, endpoint: Endpoint) -> SubmissionResult:
        try:
            body = self._transport.post_json(
                endpoint.url,
                {"barcode": code},
                self._settings.request_timeout_seconds,
            )
            name = self._interpret(body)
        except TransportError as e:
            message = f"network error: {e}"
            return _failed(code, message, message, FailureKind.TRANSPORT)
        except ApplicationError as e:
            return _failed(code, f"item not found: {e.reason}", e.reason, FailureKind.APPLICATION)
        except ProtocolError as e:
            logger.warning("Unrecognized reply for %s: %s", code, e)
            return _failed(code, MSG_INVALID_RESPONSE, MSG_INVALID_RESPONSE, FailureKind.PROTOCOL)

        return SubmissionResult(
            outcome=Success(code, name),
            entry=HistoryEntry(code=code, message=name, succeeded=True),
        )

    @staticmethod
    def _interpret(body: Optional[bytes]) -> str:
        reply = decode_reply(body)
        if isinstance(reply, ArticleFound):
            return reply.name
        if isinstance(reply, ArticleNotFound):
            raise ApplicationError(reply.reason)
        raise ProtocolError(reply.detail)

    def complete(self, result: SubmissionResult) -> None:
        self._store.complete(result.outcome, result.entry)
        logger.info(
            "Scan %s finished: %s",
            result.entry.code,
            "ok" if result.entry.succeeded else result.entry.message,
        )

    def _complete_unexpected(self, code: str, exc: BaseException) -> None:
        logger.error("Submission of %s crashed", code, exc_info=exc)
        message = f"network error: {exc}"
        self.complete(_failed(code, message, message, FailureKind.TRANSPORT))


def _failed(code: str, outcome_message: str, history_message: str, kind: FailureKind) -> SubmissionResult:
    return SubmissionResult(
        outcome=Failure(code, outcome_message, kind),
        entry=HistoryEntry(code=code, message=history_message, succeeded=False),
    )
