"""Classified failures of the URL extraction pipeline."""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Every way an extraction run can fail. Each kind is terminal for the run."""

    INVALID_URL = "InvalidUrl"
    FETCH_TIMEOUT = "FetchTimeout"
    FETCH_FAILED = "FetchFailed"
    INSUFFICIENT_CONTENT = "InsufficientContent"
    INFERENCE_FAILED = "InferenceFailed"
    UNPARSABLE_RESPONSE = "UnparsableResponse"


# HTTP-style status returned to the caller per kind
ERROR_STATUS: dict = {
    ErrorKind.INVALID_URL: 400,
    ErrorKind.FETCH_TIMEOUT: 422,
    ErrorKind.FETCH_FAILED: 422,
    ErrorKind.INSUFFICIENT_CONTENT: 422,
    ErrorKind.INFERENCE_FAILED: 500,
    ErrorKind.UNPARSABLE_RESPONSE: 500,
}

# Kinds caused by backend non-determinism; the user may simply retry
RETRIABLE_KINDS = frozenset({ErrorKind.INFERENCE_FAILED, ErrorKind.UNPARSABLE_RESPONSE})


class PipelineError(Exception):
    """A failure converted at a component boundary into one caller-facing kind."""

    def __init__(self, kind: ErrorKind, message: str, upstream_status: Optional[int] = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.upstream_status = upstream_status
        # Set by the orchestrator: last stage reached before the failure
        self.stage: Optional[str] = None

    @property
    def http_status(self) -> int:
        return ERROR_STATUS[self.kind]

    @property
    def retriable(self) -> bool:
        return self.kind in RETRIABLE_KINDS

    def to_body(self) -> dict:
        return {"error": self.message}

    def __repr__(self) -> str:
        return f"PipelineError(kind={self.kind.value!r}, message={self.message!r}, upstream_status={self.upstream_status!r})"

    @classmethod
    def invalid_url(cls) -> "PipelineError":
        return cls(ErrorKind.INVALID_URL, "有効なURLを入力してください")

    @classmethod
    def fetch_timeout(cls) -> "PipelineError":
        return cls(ErrorKind.FETCH_TIMEOUT, "ページの取得がタイムアウトしました")

    @classmethod
    def fetch_failed(cls, status_code: Optional[int] = None) -> "PipelineError":
        if status_code is None:
            return cls(
                ErrorKind.FETCH_FAILED,
                "ページの取得に失敗しました。URLが正しいか確認してください。",
            )
        return cls(
            ErrorKind.FETCH_FAILED,
            f"ページの取得に失敗しました（HTTP {status_code}）",
            upstream_status=status_code,
        )

    @classmethod
    def insufficient_content(cls) -> "PipelineError":
        return cls(ErrorKind.INSUFFICIENT_CONTENT, "ページから十分なテキストを取得できませんでした")

    @classmethod
    def inference_failed(cls) -> "PipelineError":
        return cls(
            ErrorKind.INFERENCE_FAILED,
            "AIによる解析に失敗しました。もう一度お試しください。",
        )

    @classmethod
    def unparsable_response(cls) -> "PipelineError":
        return cls(
            ErrorKind.UNPARSABLE_RESPONSE,
            "AIからの応答を解析できませんでした。もう一度お試しください。",
        )
