from __future__ import annotations

from typing import Optional

from .base import ApiModel


class ShippingAddress(ApiModel):
    """A shipping address."""

    country_code: str
    state: str
    city: str
    street_line1: str
    street_line2: str
    post_code: str


class OrderInfo(ApiModel):
    """Information about an order."""

    email: Optional[str] = None
    name: Optional[str] = None
    phone_number: Optional[str] = None
    shipping_address: Optional[ShippingAddress] = None

    def with_email(self, value: str) -> "OrderInfo":
        return self._with(email=value)

    def with_name(self, value: str) -> "OrderInfo":
        return self._with(name=value)

    def with_phone_number(self, value: str) -> "OrderInfo":
        return self._with(phone_number=value)

    def with_shipping_address(self, value: ShippingAddress) -> "OrderInfo":
        return self._with(shipping_address=value)


__all__ = ["OrderInfo", "ShippingAddress"]
