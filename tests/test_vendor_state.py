"""VendorState and VendorListView tests with a stub client."""
import pytest

from vendor_registry.client.state import (
    ADD_ERROR,
    CHECK_EMAIL_ERROR,
    DELETE_ERROR,
    LOAD_ERROR,
    VendorState,
)
from vendor_registry.client.view import CONFIRM_DELETE, VendorListView
from vendor_registry.schemas.vendor import VendorCreate, VendorOut

VENDORS = [
    VendorOut(
        id=1,
        name="Test Company 1",
        contact_person="John Test",
        email="john@testcompany.com",
        partner_type="Supplier",
    ),
    VendorOut(
        id=2,
        name="Test Company 2",
        contact_person="Jane Test",
        email="jane@testcompany.com",
        partner_type="Partner",
    ),
]


class StubClient:
    """In-memory stand-in for VendorClient that records calls."""

    def __init__(self, vendors=None, fail=()):
        self.vendors = list(vendors or [])
        self.fail = set(fail)
        self.calls = []
        self.loading_seen = []
        self.state = None

    def _enter(self, name):
        self.calls.append(name)
        if self.state is not None:
            self.loading_seen.append(self.state.loading)
        if name in self.fail:
            raise RuntimeError(f"{name} exploded")

    async def get_vendors(self):
        self._enter("get_vendors")
        return list(self.vendors)

    async def create_vendor(self, vendor: VendorCreate):
        self._enter("create_vendor")
        created = VendorOut(id=len(self.vendors) + 1, **vendor.model_dump())
        self.vendors.append(created)
        return created

    async def delete_vendor(self, vendor_id):
        self._enter("delete_vendor")
        self.vendors = [v for v in self.vendors if v.id != vendor_id]

    async def check_email_exists(self, email):
        self._enter("check_email_exists")
        return any(v.email == email for v in self.vendors)


def make_state(**kwargs):
    stub = StubClient(**kwargs)
    state = VendorState(stub)
    stub.state = state
    return state, stub


class TestRefresh:
    async def test_reverses_fetched_order(self):
        state, _ = make_state(vendors=VENDORS)
        await state.refresh()
        assert [v.id for v in state.vendors] == [2, 1]
        assert state.loading is False
        assert state.error is None

    async def test_sets_loading_while_fetching(self):
        state, stub = make_state(vendors=VENDORS)
        await state.refresh()
        assert stub.loading_seen == [True]

    async def test_failure_sets_message_without_raising(self, caplog):
        state, _ = make_state(fail={"get_vendors"})
        await state.refresh()
        assert state.error == LOAD_ERROR
        assert state.loading is False
        assert "get_vendors exploded" in caplog.text

    async def test_clears_previous_error(self):
        state, _ = make_state(vendors=VENDORS)
        state.error = "stale"
        await state.refresh()
        assert state.error is None


class TestAdd:
    NEW = VendorCreate(
        name="Acme", contact_person="Jo", email="jo@acme.com", partner_type="Supplier"
    )

    async def test_creates_then_refreshes(self):
        state, stub = make_state(vendors=VENDORS)
        await state.add(self.NEW)
        assert stub.calls == ["create_vendor", "get_vendors"]
        assert state.vendors[0].email == "jo@acme.com"
        assert state.loading is False

    async def test_failure_sets_message_and_reraises(self):
        state, stub = make_state(vendors=VENDORS, fail={"create_vendor"})
        with pytest.raises(RuntimeError):
            await state.add(self.NEW)
        assert state.error == ADD_ERROR
        assert state.loading is False
        assert stub.calls == ["create_vendor"]

    async def test_refresh_failure_does_not_fail_add(self):
        state, _ = make_state(fail={"get_vendors"})
        await state.add(self.NEW)
        assert state.error == LOAD_ERROR
        assert state.loading is False


class TestRemove:
    async def test_deletes_then_refreshes(self):
        state, stub = make_state(vendors=VENDORS)
        await state.remove(1)
        assert stub.calls == ["delete_vendor", "get_vendors"]
        assert [v.id for v in state.vendors] == [2]

    async def test_failure_sets_message_and_reraises(self):
        state, _ = make_state(vendors=VENDORS, fail={"delete_vendor"})
        with pytest.raises(RuntimeError):
            await state.remove(1)
        assert state.error == DELETE_ERROR
        assert state.loading is False


class TestCheckEmail:
    async def test_delegates(self):
        state, _ = make_state(vendors=VENDORS)
        assert await state.check_email_exists("jane@testcompany.com") is True
        assert await state.check_email_exists("nobody@testcompany.com") is False

    async def test_does_not_touch_loading(self):
        state, stub = make_state(vendors=VENDORS)
        await state.check_email_exists("jane@testcompany.com")
        assert stub.loading_seen == [False]
        assert state.loading is False

    async def test_failure_sets_message_and_reraises(self):
        state, _ = make_state(fail={"check_email_exists"})
        with pytest.raises(RuntimeError):
            await state.check_email_exists("x@y.z")
        assert state.error == CHECK_EMAIL_ERROR


class TestVendorListView:
    def view(self, state, confirm=lambda _: True):
        return VendorListView(state, confirm=confirm)

    def test_renders_title(self):
        state, _ = make_state()
        assert self.view(state).render().splitlines()[0] == "Vendor List"

    async def test_mount_refreshes_once(self):
        state, stub = make_state(vendors=VENDORS)
        await self.view(state).mount()
        assert stub.calls == ["get_vendors"]

    def test_loading(self):
        state, _ = make_state()
        state.loading = True
        view = self.view(state)
        assert "Loading vendors..." in view.render()
        assert view.shows_table is False

    def test_error(self):
        state, _ = make_state()
        state.error = "Failed to load vendors"
        view = self.view(state)
        assert "Failed to load vendors" in view.render()
        assert view.shows_table is False

    def test_empty(self):
        state, _ = make_state()
        view = self.view(state)
        assert "No vendors found" in view.render()
        assert view.shows_table is False

    def test_table(self):
        state, _ = make_state()
        state.vendors = list(VENDORS)
        view = self.view(state)
        assert view.shows_table is True

        lines = view.render().splitlines()
        header = [cell.strip() for cell in lines[2].split("|")]
        assert header == [
            "ID", "Name", "Contact Person", "Email", "Partner Type", "Actions",
        ]
        assert view.rows()[0] == (
            "1", "Test Company 1", "John Test", "john@testcompany.com", "Supplier", "Delete",
        )
        assert len(view.rows()) == 2
        assert len(lines) == 2 + 2 + 2  # title, underline, header, rule, rows

    async def test_delete_confirmed(self):
        asked = []
        state, stub = make_state(vendors=VENDORS)
        view = self.view(state, confirm=lambda msg: asked.append(msg) or True)
        assert await view.delete(1) is True
        assert asked == [CONFIRM_DELETE]
        assert "delete_vendor" in stub.calls

    async def test_delete_declined(self):
        state, stub = make_state(vendors=VENDORS)
        view = self.view(state, confirm=lambda _: False)
        assert await view.delete(1) is False
        assert stub.calls == []
