"""SOAP 1.1 엔벨로프 인코딩/디코딩 유틸리티.

SOAP 1.1 envelope codec for the client information web service.
Parses ``GetClientInformationRequest`` envelopes and renders
``GetClientInformationResponse`` envelopes and faults.

Element names follow the XML convention of the service namespace
(camelCase), e.g. ``personIdentification``, ``clientType``.
"""

import xml.etree.ElementTree as ET

from openbank.schemas.client import ClientApi

SOAP_ENV_NS: str = "http://schemas.xmlsoap.org/soap/envelope/"
SERVICE_NS: str = "http://openbank.se/ws/client"

ET.register_namespace("soap", SOAP_ENV_NS)
ET.register_namespace("ob", SERVICE_NS)


class SoapFaultError(Exception):
    """SOAP fault로 응답해야 하는 오류.

    Error answered with a SOAP fault.

    Attributes:
        code: fault 코드 ("soap:Client" 또는 "soap:Server")
        message: fault 메시지 (faultstring)
    """

    def __init__(self, message: str, code: str = "soap:Client") -> None:
        super().__init__(message)
        self.code: str = code
        self.message: str = message


def _soap(tag: str) -> str:
    return f"{{{SOAP_ENV_NS}}}{tag}"


def _svc(tag: str) -> str:
    return f"{{{SERVICE_NS}}}{tag}"


class _EnvelopeTreeBuilder:
    """DTD를 거부하는 파서 타깃 (Parser target refusing document type declarations).

    SOAP 1.1 messages must not carry a DTD, so any document type
    declaration fails the parse with a ``soap:Client`` fault.
    """

    def __init__(self) -> None:
        self._builder = ET.TreeBuilder()

    def start(self, tag: str, attrib: dict[str, str]) -> ET.Element:
        return self._builder.start(tag, attrib)

    def end(self, tag: str) -> ET.Element:
        return self._builder.end(tag)

    def data(self, data: str) -> None:
        self._builder.data(data)

    def close(self) -> ET.Element:
        return self._builder.close()

    def doctype(self, name: str, pubid: str | None, system: str | None) -> None:
        raise SoapFaultError("Malformed SOAP envelope: document type declarations are not allowed")


def parse_get_client_request(payload: bytes) -> str:
    """GetClientInformationRequest 엔벨로프에서 개인 식별 번호를 추출합니다.

    Extract the person identification from a GetClientInformationRequest
    envelope.

    Raises:
        SoapFaultError: XML 또는 엔벨로프 구조 오류 (Malformed XML or envelope)
    """
    try:
        root = ET.fromstring(payload, parser=ET.XMLParser(target=_EnvelopeTreeBuilder()))
    except ET.ParseError as exc:
        raise SoapFaultError(f"Malformed SOAP envelope: {exc}") from exc

    if root.tag != _soap("Envelope"):
        raise SoapFaultError("Malformed SOAP envelope: missing Envelope element")

    body = root.find(_soap("Body"))
    if body is None:
        raise SoapFaultError("Malformed SOAP envelope: missing Body element")

    request = body.find(_svc("GetClientInformationRequest"))
    if request is None:
        raise SoapFaultError("Unsupported SOAP operation")

    element = request.find(_svc("personIdentification"))
    if element is None or not (element.text or "").strip():
        raise SoapFaultError("Missing personIdentification element")

    return (element.text or "").strip()


def _sub(parent: ET.Element, tag: str, text: object | None = None) -> ET.Element:
    child = ET.SubElement(parent, _svc(tag))
    if text is not None:
        child.text = str(text)
    return child


def _envelope() -> tuple[ET.Element, ET.Element]:
    envelope = ET.Element(_soap("Envelope"))
    body = ET.SubElement(envelope, _soap("Body"))
    return envelope, body


def render_client_response(client: ClientApi) -> bytes:
    """GetClientInformationResponse 엔벨로프를 생성합니다.

    Render a GetClientInformationResponse envelope for a client.
    """
    envelope, body = _envelope()
    response = ET.SubElement(body, _svc("GetClientInformationResponse"))
    client_el = _sub(response, "client")

    person_el = _sub(client_el, "person")
    _sub(person_el, "personIdentification", client.person.person_identification)
    _sub(person_el, "firstName", client.person.first_name)
    _sub(person_el, "lastName", client.person.last_name)
    _sub(person_el, "mail", client.person.mail)

    type_el = _sub(client_el, "clientType")
    _sub(type_el, "type", client.client_type.type.value)
    _sub(type_el, "rating", client.client_type.rating)
    if client.client_type.special_offers is not None:
        _sub(type_el, "specialOffers", client.client_type.special_offers)
    if client.client_type.premium_rating is not None:
        _sub(type_el, "premiumRating", client.client_type.premium_rating)

    accounts_el = _sub(client_el, "accountList")
    for account in client.account_list:
        account_el = _sub(accounts_el, "account")
        _sub(account_el, "balance", account.balance)
        transactions_el = _sub(account_el, "accountTransactionList")
        for transaction in account.account_transaction_list:
            transaction_el = _sub(transactions_el, "accountTransaction")
            _sub(transaction_el, "transactionType", transaction.transaction_type.value)
            _sub(transaction_el, "message", transaction.message)

    return ET.tostring(envelope, encoding="utf-8", xml_declaration=True)


def render_fault(fault: SoapFaultError) -> bytes:
    """SOAP fault 엔벨로프를 생성합니다 (Render a SOAP 1.1 fault envelope)."""
    envelope, body = _envelope()
    fault_el = ET.SubElement(body, _soap("Fault"))
    # SOAP 1.1 fault 하위 요소는 네임스페이스 없음 — Fault children are unqualified in SOAP 1.1
    ET.SubElement(fault_el, "faultcode").text = fault.code
    ET.SubElement(fault_el, "faultstring").text = fault.message
    return ET.tostring(envelope, encoding="utf-8", xml_declaration=True)
