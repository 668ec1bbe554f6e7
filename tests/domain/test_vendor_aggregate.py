"""Tests for the Vendor aggregate root."""

from stockroom.vendor.events import VendorRegistered
from stockroom.vendor.vendor import Vendor


class TestVendorRegistration:
    def test_register(self):
        vendor = Vendor.register(
            name="Fresh Foods Ltd",
            contact_person="John Mensah",
            phone="+233 24 123 4567",
            email="john@freshfoods.com",
        )
        assert vendor.name == "Fresh Foods Ltd"
        assert vendor.contact_person == "John Mensah"
        assert vendor.created_at is not None

    def test_register_raises_event(self):
        vendor = Vendor.register(name="Metro Wholesale")
        event = vendor._events[0]
        assert isinstance(event, VendorRegistered)
        assert event.name == "Metro Wholesale"
