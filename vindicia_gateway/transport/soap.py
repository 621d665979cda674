"""
SOAP transport over httpx.

Builds a SOAP 1.1 envelope per call, posts it to the configured endpoint
and turns the reply body into nested dicts. One attempt per call; nothing
here retries.
"""
import xml.etree.ElementTree as ET
from typing import Any, Dict, Mapping, Optional

import httpx
import structlog

from vindicia_gateway.config import GatewaySettings
from vindicia_gateway.exceptions import ProviderFaultError, TransportError
from vindicia_gateway.logging import redact
from vindicia_gateway.transport.base import Transport

logger = structlog.get_logger(__name__)

SOAP_ENV_NS = "http://schemas.xmlsoap.org/soap/envelope/"
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"
XSI_NIL = f"{{{XSI_NS}}}nil"

ET.register_namespace("soap", SOAP_ENV_NS)
ET.register_namespace("xsi", XSI_NS)


def local_name(tag: str) -> str:
    """Strip the {namespace} prefix ElementTree puts on tags."""
    return tag.rsplit("}", 1)[-1]


def element_to_value(element: ET.Element) -> Any:
    """
    Convert an element to a Python value.

    Leaves become their text (None for empty or xsi:nil elements). Elements
    with children become dicts; a child tag that repeats becomes a list.
    """
    if element.get(XSI_NIL) == "true":
        return None

    children = list(element)
    if not children:
        return element.text

    value: Dict[str, Any] = {}
    for child in children:
        key = local_name(child.tag)
        child_value = element_to_value(child)
        if key not in value:
            value[key] = child_value
        elif isinstance(value[key], list):
            value[key].append(child_value)
        else:
            value[key] = [value[key], child_value]
    return value


class SoapTransport(Transport):
    """
    Talks to the provider's SOAP API.

    Example:
        with SoapTransport(get_settings()) as transport:
            reply = transport.call("AutoBill", "fetchByVid", {"vid": "..."})
    """

    def __init__(self, settings: GatewaySettings, client: Optional[httpx.Client] = None):
        """
        Initialize SOAP transport.

        Args:
            settings: Credentials, endpoint and timeout
            client: Optional preconfigured httpx client
        """
        self.settings = settings
        self.client = client or httpx.Client(timeout=settings.timeout)

        logger.info(
            "soap_transport_initialized",
            endpoint=settings.endpoint_url,
            api_version=settings.api_version,
            test_mode=settings.test_mode,
        )

    def namespace(self, object_name: str) -> str:
        return f"http://soap.vindicia.com/{self.settings.namespace_version}/{object_name}"

    def _append(self, parent: ET.Element, name: str, value: Any) -> None:
        if isinstance(value, (list, tuple)):
            for item in value:
                self._append(parent, name, item)
            return

        element = ET.SubElement(parent, name)
        if value is None:
            element.set(XSI_NIL, "true")
        elif isinstance(value, Mapping):
            for key, child in value.items():
                self._append(element, key, child)
        elif isinstance(value, bool):
            element.text = "true" if value else "false"
        else:
            element.text = str(value)

    def build_envelope(self, object_name: str, action: str, payload: Mapping[str, Any]) -> bytes:
        envelope = ET.Element(f"{{{SOAP_ENV_NS}}}Envelope")
        body = ET.SubElement(envelope, f"{{{SOAP_ENV_NS}}}Body")
        method = ET.SubElement(body, action, {"xmlns": self.namespace(object_name)})

        self._append(
            method,
            "auth",
            {
                "login": self.settings.username,
                "password": self.settings.password,
                "version": self.settings.api_version,
                "userAgent": self.settings.user_agent,
            },
        )
        for key, value in payload.items():
            self._append(method, key, value)

        return ET.tostring(envelope, encoding="utf-8", xml_declaration=True)

    def parse_reply(self, content: bytes) -> Dict[str, Any]:
        """
        Parse a SOAP reply body.

        Raises:
            ProviderFaultError: If the body holds a SOAP fault
            TransportError: If the reply is not a usable SOAP envelope
        """
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise TransportError("Malformed reply from provider", original_error=e) from e

        body = root.find(f"{{{SOAP_ENV_NS}}}Body")
        if body is None:
            raise TransportError("Malformed reply from provider: no SOAP body")

        fault = body.find(f"{{{SOAP_ENV_NS}}}Fault")
        if fault is not None:
            fault_code = fault.findtext("faultcode")
            fault_string = fault.findtext("faultstring") or "Unknown SOAP fault"
            raise ProviderFaultError(fault_string, fault_code=fault_code)

        result = next(iter(body), None)
        if result is None:
            raise TransportError("Malformed reply from provider: empty SOAP body")

        value = element_to_value(result)
        return value if isinstance(value, dict) else {}

    def call(self, object_name: str, action: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        namespace = self.namespace(object_name)
        envelope = self.build_envelope(object_name, action, payload)

        logger.info("soap_call", object=object_name, action=action)
        logger.debug(
            "soap_payload",
            object=object_name,
            action=action,
            payload=redact(dict(payload)),
        )

        try:
            response = self.client.post(
                self.settings.endpoint_url,
                content=envelope,
                headers={
                    "Content-Type": "text/xml; charset=utf-8",
                    "SOAPAction": f'"{namespace}#{action}"',
                },
            )
        except httpx.HTTPError as e:
            logger.error(
                "transport_error",
                object=object_name,
                action=action,
                error=str(e),
            )
            raise TransportError(f"Connection to provider failed: {e}", original_error=e) from e

        try:
            reply = self.parse_reply(response.content)
        except ProviderFaultError as e:
            logger.error(
                "soap_fault",
                object=object_name,
                action=action,
                fault_code=e.fault_code,
                fault_string=str(e),
            )
            raise
        except TransportError:
            if response.is_error:
                raise TransportError(
                    f"Provider returned HTTP {response.status_code}"
                ) from None
            raise

        if response.is_error:
            raise TransportError(f"Provider returned HTTP {response.status_code}")

        return reply

    def close(self) -> None:
        self.client.close()
        logger.debug("soap_transport_closed")
