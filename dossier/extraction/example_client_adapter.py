"""Offline extraction client adapter.

Picks a canned document by keywords in the file name that the extractor puts
into the user prompt. Use it for local development, demos and tests, and as a
template for new provider adapters registered in ExtractorFactory.
"""

import json
from typing import ClassVar

from dossier.extraction.client_base import BaseExtractionClient


class ExampleClientAdapter(BaseExtractionClient):
    """Example adapter that returns fixed valid document JSON. No network calls."""

    PASSPORT_RESPONSE: ClassVar[dict[str, object]] = {
        "type": "passport",
        "lastName": "Petrov",
        "firstName": "Petr",
        "middleName": "Petrovich",
        "seriesNumber": "4510 123456",
        "issuedBy": "TP UFMS of Russia in Moscow, Arbat district",
        "dateIssued": "14.05.2015",
        "departmentCode": "770-001",
        "birthDate": "01.01.1990",
        "birthPlace": "Moscow",
        "registrationCity": "Moscow",
        "registrationStreet": "Arbat st.",
        "registrationHouse": "1",
        "registrationFlat": "1",
        "registrationDate": "20.05.2015",
        "snils": None,
    }
    DIPLOMA_RESPONSE: ClassVar[dict[str, object]] = {
        "type": "diploma",
        "lastName": "Petrov",
        "firstName": "Petr",
        "middleName": "Petrovich",
        "series": "1024",
        "number": "567890",
        "regNumber": "123-45",
        "institution": "Moscow State Technical University",
        "city": "Moscow",
        "specialty": "Information systems and technologies",
        "qualification": "Engineer",
        "dateIssued": "25.06.2018",
    }
    QUALIFICATION_RESPONSE: ClassVar[dict[str, object]] = {
        "type": "qualification",
        "lastName": "Petrov",
        "firstName": "Petr",
        "middleName": "Petrovich",
        "registrationNumber": "16.02500.09.00093713.28",
        "issueDate": "21.11.2025",
        "expirationDate": "21.11.2028",
        "assessmentCenterName": "CEAT LLC",
        "assessmentCenterRegNumber": "78.041 / 78.041.78.13",
    }
    SNILS_RESPONSE: ClassVar[dict[str, object]] = {
        "type": "snils",
        "lastName": "Petrov",
        "firstName": "Petr",
        "middleName": "Petrovich",
        "snils": "123-456-789 00",
    }

    KEYWORDS: ClassVar[tuple[tuple[tuple[str, ...], str], ...]] = (
        (("diploma", "диплом"), "DIPLOMA_RESPONSE"),
        (("qual", "свидетельство", "цок"), "QUALIFICATION_RESPONSE"),
        (("snils", "снилс"), "SNILS_RESPONSE"),
    )

    def __init__(self) -> None:
        pass

    def create_vision_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        image_bytes: bytes,
        mime_type: str,
    ) -> str:
        _ = model, temperature, system_prompt, image_bytes, mime_type
        hint = user_prompt.lower()
        for keywords, attr in self.KEYWORDS:
            if any(k in hint for k in keywords):
                return json.dumps(getattr(self, attr), ensure_ascii=False)
        return json.dumps(self.PASSPORT_RESPONSE, ensure_ascii=False)
