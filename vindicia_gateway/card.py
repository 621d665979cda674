"""
Credit card and billing address details.

A card is also used without a number, purely to carry the customer's name
and billing address (e.g. for a PayPal purchase). Number checks only apply
when a number is present.
"""
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from vindicia_gateway.exceptions import InvalidCreditCardError
from vindicia_gateway.parameters import ValueObject, is_blank


def luhn_valid(number: str) -> bool:
    digits = [int(d) for d in number]
    checksum = 0
    for index, digit in enumerate(reversed(digits)):
        if index % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        checksum += digit
    return checksum % 10 == 0


def _to_int(value: Any, field: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidCreditCardError(f"Card expiry {field} must be a number.") from None


class CreditCard(ValueObject):
    def get_first_name(self) -> Optional[str]:
        return self.get_parameter("firstName")

    def set_first_name(self, value: Optional[str]) -> "CreditCard":
        return self.set_parameter("firstName", value)

    def get_last_name(self) -> Optional[str]:
        return self.get_parameter("lastName")

    def set_last_name(self, value: Optional[str]) -> "CreditCard":
        return self.set_parameter("lastName", value)

    def get_name(self) -> Optional[str]:
        name = " ".join(n for n in (self.get_first_name(), self.get_last_name()) if n)
        return name or None

    def set_name(self, value: Optional[str]) -> "CreditCard":
        first, _, last = (value or "").partition(" ")
        self.set_first_name(first or None)
        return self.set_last_name(last or None)

    def get_number(self) -> Optional[str]:
        return self.get_parameter("number")

    def set_number(self, value: Optional[str]) -> "CreditCard":
        # keep digits only; spaces and dashes are common in user input
        if value is not None:
            value = "".join(ch for ch in str(value) if ch.isdigit())
        return self.set_parameter("number", value)

    def get_number_last_four(self) -> Optional[str]:
        number = self.get_number()
        return number[-4:] if number else None

    def get_expiry_month(self) -> Optional[int]:
        return self.get_parameter("expiryMonth")

    def set_expiry_month(self, value: Any) -> "CreditCard":
        if is_blank(value):
            return self.set_parameter("expiryMonth", None)
        return self.set_parameter("expiryMonth", _to_int(value, "month"))

    def get_expiry_year(self) -> Optional[int]:
        return self.get_parameter("expiryYear")

    def set_expiry_year(self, value: Any) -> "CreditCard":
        if is_blank(value):
            return self.set_parameter("expiryYear", None)
        year = _to_int(value, "year")
        # two digit years are taken to be in the current century
        if year < 100:
            year += datetime.now(timezone.utc).year // 100 * 100
        return self.set_parameter("expiryYear", year)

    def get_cvv(self) -> Optional[str]:
        return self.get_parameter("cvv")

    def set_cvv(self, value: Optional[str]) -> "CreditCard":
        return self.set_parameter("cvv", value)

    def get_address1(self) -> Optional[str]:
        return self.get_parameter("address1")

    def set_address1(self, value: Optional[str]) -> "CreditCard":
        return self.set_parameter("address1", value)

    def get_address2(self) -> Optional[str]:
        return self.get_parameter("address2")

    def set_address2(self, value: Optional[str]) -> "CreditCard":
        return self.set_parameter("address2", value)

    def get_city(self) -> Optional[str]:
        return self.get_parameter("city")

    def set_city(self, value: Optional[str]) -> "CreditCard":
        return self.set_parameter("city", value)

    def get_state(self) -> Optional[str]:
        return self.get_parameter("state")

    def set_state(self, value: Optional[str]) -> "CreditCard":
        return self.set_parameter("state", value)

    def get_postcode(self) -> Optional[str]:
        return self.get_parameter("postcode")

    def set_postcode(self, value: Optional[str]) -> "CreditCard":
        return self.set_parameter("postcode", value)

    def get_country(self) -> Optional[str]:
        return self.get_parameter("country")

    def set_country(self, value: Optional[str]) -> "CreditCard":
        return self.set_parameter("country", value)

    def get_phone(self) -> Optional[str]:
        return self.get_parameter("phone")

    def set_phone(self, value: Optional[str]) -> "CreditCard":
        return self.set_parameter("phone", value)

    def get_email(self) -> Optional[str]:
        return self.get_parameter("email")

    def set_email(self, value: Optional[str]) -> "CreditCard":
        return self.set_parameter("email", value)

    def get_expiry_date(self) -> Optional[str]:
        """Expiry as the provider's YYYYMM."""
        if self.get_expiry_month() is None or self.get_expiry_year() is None:
            return None
        return f"{self.get_expiry_year():04d}{self.get_expiry_month():02d}"

    def validate(self) -> None:
        number = self.get_number()
        if is_blank(number):
            return

        if self.get_expiry_month() is None or self.get_expiry_year() is None:
            raise InvalidCreditCardError("Card expiry month and year are required.")
        if not 1 <= self.get_expiry_month() <= 12:
            raise InvalidCreditCardError("Card expiry month must be between 1 and 12.")

        now = datetime.now(timezone.utc)
        if (self.get_expiry_year(), self.get_expiry_month()) < (now.year, now.month):
            raise InvalidCreditCardError("Card has expired.")

        if not 12 <= len(number) <= 19 or not luhn_valid(number):
            raise InvalidCreditCardError("Card number is invalid.")

    def serialize_billing_address(self) -> Dict[str, Any]:
        return {
            "name": self.get_name(),
            "addr1": self.get_address1(),
            "addr2": self.get_address2(),
            "city": self.get_city(),
            "district": self.get_state(),
            "postalCode": self.get_postcode(),
            "country": self.get_country(),
            "phone": self.get_phone(),
        }

    def serialize(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "accountHolderName": self.get_name(),
            "billingAddress": self.serialize_billing_address(),
        }
        if self.get_number():
            data["creditCard"] = {
                "account": self.get_number(),
                "expirationDate": self.get_expiry_date(),
            }
        if self.get_cvv():
            data["nameValues"] = [{"name": "CVN", "value": self.get_cvv()}]
        return data
