# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Exception hierarchy for catbox-redis.

All adapter exceptions inherit from CatboxException, so a caller can catch
the whole family with one handler or single out a category.

Categories:
- ValidationException: malformed cache keys and segment names
- InfrastructureException: connection state problems
- DataIntegrityException: unreadable data found in the store

Errors raised by the JSON encoder or by the Redis driver are not part of
this hierarchy; they reach the caller unchanged.
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class CatboxException(Exception):
    """Base exception for all catbox-redis errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "NOT_CONNECTED").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Validation Exceptions
# =============================================================================


class ValidationException(CatboxException):
    """Input validation failures."""


class InvalidKeyException(ValidationException):
    """A cache key is missing, of the wrong shape, or has empty parts."""

    def __init__(self, message: str = "Invalid key", context: dict | None = None) -> None:
        super().__init__(message, code="INVALID_KEY", context=context)


class SegmentNameException(ValidationException):
    """A segment name cannot be used to namespace cache entries."""

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message, code="INVALID_SEGMENT", context=context)


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(CatboxException):
    """Connection and transport level failures raised by the adapter itself."""


class NotConnectedException(InfrastructureException):
    """The connection handle is not ready; no remote call was attempted."""

    def __init__(self, message: str = "Client not connected", context: dict | None = None) -> None:
        super().__init__(message, code="NOT_CONNECTED", context=context)


class ConnectionStateException(InfrastructureException):
    """A connection handle was asked to connect outside of the ``wait`` state."""

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message, code="CONNECTION_STATE", context=context)


# =============================================================================
# Data Integrity Exceptions
# =============================================================================


class DataIntegrityException(CatboxException):
    """Stored data violates the expected format."""


class EnvelopeException(DataIntegrityException):
    """A stored envelope could not be parsed or is missing required fields."""
