"""Domain-specific exceptions — framework-independent.

Every failure carries a human-readable message and a machine-readable
``kind`` so the presentation layer can map it to a transport status
without inspecting message text.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Machine-readable error kinds raised by the warranty engine."""

    MALFORMED_SERIAL = "MalformedSerial"
    INVALID_SERIAL = "InvalidSerial"
    PASSPORT_NOT_FOUND = "PassportNotFound"
    AMBIGUOUS_PASSPORT = "AmbiguousPassport"
    ALREADY_EXISTS = "AlreadyExists"
    ENTITY_NOT_FOUND = "EntityNotFound"
    DEVICE_NOT_FOUND = "DeviceNotFound"
    NOT_REGISTERED = "NotRegistered"
    USER_NOT_FOUND = "UserNotFound"
    HAS_DEPENDENT_RECORDS = "HasDependentRecords"
    STORAGE_FAILURE = "StorageFailure"


class DomainError(Exception):
    """Base class for all engine failures."""

    kind: ErrorKind = ErrorKind.STORAGE_FAILURE

    def __init__(self, message: str, kind: ErrorKind | None = None):
        if kind is not None:
            self.kind = kind
        self.message = message
        super().__init__(message)


class MalformedSerialError(DomainError):
    """Raised when a serial has no trailing numeric part."""

    kind = ErrorKind.MALFORMED_SERIAL

    def __init__(self, serial: str):
        self.serial = serial
        super().__init__(f"Malformed serial number '{serial}'")


class InvalidSerialError(DomainError):
    """Raised when a serial cannot be bound to any passport."""

    kind = ErrorKind.INVALID_SERIAL

    def __init__(self, serial: str, message: str = "Invalid serial number"):
        self.serial = serial
        super().__init__(message)


class EntityNotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    kind = ErrorKind.ENTITY_NOT_FOUND

    def __init__(
        self,
        entity_type: str,
        entity_id: int | str,
        message: str | None = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message or f"{entity_type} with id '{entity_id}' not found")


class PassportNotFoundError(EntityNotFoundError):
    kind = ErrorKind.PASSPORT_NOT_FOUND

    def __init__(self, lookup: int | str):
        super().__init__("Passport", lookup, "Passport not found")


class DeviceNotFoundError(EntityNotFoundError):
    kind = ErrorKind.DEVICE_NOT_FOUND

    def __init__(self, serial_number: str):
        super().__init__("Device", serial_number, "Device not found")


class DeviceNotRegisteredError(EntityNotFoundError):
    """Raised by precondition gates that need a registered device."""

    kind = ErrorKind.NOT_REGISTERED

    def __init__(self, serial_number: str):
        super().__init__("Device", serial_number, "Device not registered")


class UserNotFoundError(EntityNotFoundError):
    kind = ErrorKind.USER_NOT_FOUND

    def __init__(self, user_id: int | None):
        super().__init__("User", "null" if user_id is None else user_id, "User not found")


class AmbiguousPassportError(DomainError):
    """Internal consistency fault: more than one passport covers a serial.

    Only reachable if the overlap-free invariant was violated at write time.
    """

    kind = ErrorKind.AMBIGUOUS_PASSPORT

    def __init__(self, serial: str, passport_ids: list[int | None]):
        self.serial = serial
        self.passport_ids = passport_ids
        super().__init__(
            f"Serial '{serial}' is covered by {len(passport_ids)} passports: {passport_ids}"
        )


class DuplicateEntityError(DomainError):
    """Raised when attempting to create a duplicate entity."""

    kind = ErrorKind.ALREADY_EXISTS

    def __init__(
        self,
        entity_type: str,
        field: str,
        value: str,
        message: str | None = None,
    ):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(message or f"{entity_type} with {field}='{value}' already exists")


class DependentRecordsError(DomainError):
    """Raised when a delete is blocked by records that reference the entity."""

    kind = ErrorKind.HAS_DEPENDENT_RECORDS

    def __init__(self, entity_type: str, entity_id: int | str, message: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message)


class StorageFailureError(DomainError):
    """Unexpected persistence error. The original exception is chained."""

    kind = ErrorKind.STORAGE_FAILURE
