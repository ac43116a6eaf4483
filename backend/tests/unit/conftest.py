"""In-memory fake repositories shared by the unit tests."""

from dataclasses import replace

import pytest

from device_warranty.application.interfaces import (
    DeviceRepository,
    PassportRepository,
    RenovationRepository,
    UserRepository,
)
from device_warranty.application.services import (
    DeviceService,
    PassportResolver,
    PassportService,
    RenovationService,
)
from device_warranty.domain.entities import (
    Device,
    Page,
    Passport,
    Renovation,
    User,
    UserRole,
    page_offset,
)
from device_warranty.domain.exceptions import DependentRecordsError, DuplicateEntityError


class FakePassportRepository(PassportRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._passports: dict[int, Passport] = {}
        self._next_id = 1
        self.locked_prefixes: list[str] = []

    def add(self, passport: Passport) -> Passport:
        """Seed a passport without going through the overlap check."""
        passport.id = self._next_id
        self._next_id += 1
        self._passports[passport.id] = passport
        return passport

    async def get_by_id(self, passport_id: int) -> Passport | None:
        return self._passports.get(passport_id)

    async def get_page(self, page: int, size: int) -> Page[Passport]:
        ordered = sorted(
            self._passports.values(), key=lambda p: (p.serial_prefix, p.from_serial_number)
        )
        offset = page_offset(page, size)
        return Page(ordered[offset : offset + size], page, size, len(ordered))

    async def find_by_prefix(self, serial: str) -> list[Passport]:
        return [p for p in self._passports.values() if serial.startswith(p.serial_prefix)]

    async def find_overlapping(
        self,
        serial_prefix: str,
        from_serial_number: int,
        to_serial_number: int,
        exclude_id: int | None = None,
    ) -> list[Passport]:
        return [
            p
            for p in self._passports.values()
            if p.serial_prefix == serial_prefix
            and p.id != exclude_id
            and p.from_serial_number <= to_serial_number
            and p.to_serial_number >= from_serial_number
        ]

    async def lock_prefix(self, serial_prefix: str) -> None:
        self.locked_prefixes.append(serial_prefix)

    async def create(self, passport: Passport) -> Passport:
        return self.add(passport)

    async def update(self, passport: Passport) -> Passport:
        if passport.id not in self._passports:
            raise ValueError(f"Passport {passport.id} not found")
        self._passports[passport.id] = passport
        return passport

    async def delete(self, passport_id: int) -> bool:
        return self._passports.pop(passport_id, None) is not None


class FakeDeviceRepository(DeviceRepository):
    """Stores copies, so callers only see what was written back."""

    def __init__(self, renovations: "FakeRenovationRepository | None" = None):
        self._devices: dict[str, Device] = {}
        self._renovations = renovations
        self.locked_serials: list[str] = []

    async def get_by_serial(self, serial_number: str, *, for_update: bool = False) -> Device | None:
        if for_update:
            self.locked_serials.append(serial_number)
        stored = self._devices.get(serial_number)
        return replace(stored) if stored else None

    async def exists(self, serial_number: str) -> bool:
        return serial_number in self._devices

    async def get_page(
        self,
        page: int,
        size: int,
        *,
        search: str | None = None,
        owner_id: int | None = None,
    ) -> Page[Device]:
        devices = sorted(self._devices.values(), key=lambda d: d.serial_number)
        if search:
            devices = [d for d in devices if search.lower() in d.serial_number.lower()]
        if owner_id is not None:
            devices = [d for d in devices if d.owner_id == owner_id]
        offset = page_offset(page, size)
        return Page(devices[offset : offset + size], page, size, len(devices))

    async def create(self, device: Device) -> Device:
        if device.serial_number in self._devices:
            raise DuplicateEntityError(
                "Device", "serial_number", device.serial_number, message="Device already registered"
            )
        self._devices[device.serial_number] = replace(device)
        return device

    async def update(self, device: Device) -> Device:
        stored = self._devices.get(device.serial_number)
        if stored is None:
            raise ValueError(f"Device {device.serial_number} not found")
        self._devices[device.serial_number] = replace(device, owner_id=stored.owner_id)
        return replace(self._devices[device.serial_number])

    async def claim_owner(self, device: Device) -> bool:
        stored = self._devices.get(device.serial_number)
        if stored is None or stored.owner_id is not None:
            return False
        self._devices[device.serial_number] = replace(
            stored,
            owner_id=device.owner_id,
            warranty_expiration_date=device.warranty_expiration_date,
            updated_at=device.updated_at,
        )
        return True

    async def delete_by_serial(self, serial_number: str) -> bool:
        if self._renovations is not None and await self._renovations.list_for_device(serial_number):
            raise DependentRecordsError(
                "Device", serial_number, "Cannot delete device: renovations exist"
            )
        return self._devices.pop(serial_number, None) is not None


class FakeRenovationRepository(RenovationRepository):
    def __init__(self):
        self._renovations: dict[int, Renovation] = {}
        self._next_id = 1

    async def get_by_id(self, renovation_id: int) -> Renovation | None:
        return self._renovations.get(renovation_id)

    async def list_for_device(self, serial_number: str) -> list[Renovation]:
        found = [r for r in self._renovations.values() if r.device_serial_number == serial_number]
        return sorted(found, key=lambda r: (r.renovation_date, r.id), reverse=True)

    async def create(self, renovation: Renovation) -> Renovation:
        renovation.id = self._next_id
        self._next_id += 1
        self._renovations[renovation.id] = renovation
        return renovation

    async def delete(self, renovation_id: int) -> bool:
        return self._renovations.pop(renovation_id, None) is not None


class FakeUserRepository(UserRepository):
    def __init__(self, users: list[User]):
        self._users = {u.id: u for u in users}

    async def get_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)


@pytest.fixture
def passport_repository() -> FakePassportRepository:
    return FakePassportRepository()


@pytest.fixture
def renovation_repository() -> FakeRenovationRepository:
    return FakeRenovationRepository()


@pytest.fixture
def device_repository(renovation_repository) -> FakeDeviceRepository:
    return FakeDeviceRepository(renovation_repository)


@pytest.fixture
def user_repository() -> FakeUserRepository:
    return FakeUserRepository(
        [
            User(id=1, full_name="Jan Kowalski", email="jan@example.com"),
            User(id=2, full_name="Admin", email="admin@example.com", role=UserRole.ADMIN),
        ]
    )


@pytest.fixture
def passport_service(passport_repository) -> PassportService:
    return PassportService(passport_repository)


@pytest.fixture
def resolver(passport_repository) -> PassportResolver:
    return PassportResolver(passport_repository)


@pytest.fixture
def device_service(device_repository, resolver, passport_repository, user_repository) -> DeviceService:
    return DeviceService(
        repository=device_repository,
        resolver=resolver,
        passport_repository=passport_repository,
        user_repository=user_repository,
    )


@pytest.fixture
def renovation_service(renovation_repository, device_service) -> RenovationService:
    return RenovationService(renovation_repository, device_service)


@pytest.fixture
def make_passport(passport_repository):
    """Seed a passport directly into the fake repository."""

    def _make(prefix: str, start: int, end: int, months: int = 12, name: str = "Passport") -> Passport:
        return passport_repository.add(
            Passport(
                name=name,
                model="ModelX",
                serial_prefix=prefix,
                from_serial_number=start,
                to_serial_number=end,
                warranty_months=months,
            )
        )

    return _make
