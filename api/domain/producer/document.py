# api/domain/producer/document.py
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from api.domain.errors import DomainValidationError

INVALID_DOCUMENT_MESSAGE = "Invalid document. Must be a valid CPF or CNPJ."

_NAO_DIGITO = re.compile(r"\D", re.ASCII)


class DocumentType(StrEnum):
    CPF = "CPF"
    CNPJ = "CNPJ"


class InvalidDocumentError(DomainValidationError):
    def __init__(self) -> None:
        super().__init__(INVALID_DOCUMENT_MESSAGE)


def _digito_cpf(digitos: str, peso_inicial: int) -> int:
    soma = sum(int(d) * peso for d, peso in zip(digitos, range(peso_inicial, 1, -1)))
    resto = (soma * 10) % 11
    return 0 if resto >= 10 else resto


def _verificar_cpf(digitos: str) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CPF."""
    if len(digitos) != 11 or len(set(digitos)) == 1:
        return False
    if _digito_cpf(digitos[:9], 10) != int(digitos[9]):
        return False
    return _digito_cpf(digitos[:10], 11) == int(digitos[10])


def _digito_cnpj(base: str) -> int:
    # Pesos ciclicos 9..2, comecando em len(base) - 7 na posicao mais a esquerda.
    soma = 0
    peso = len(base) - 7
    for d in base:
        soma += int(d) * peso
        peso -= 1
        if peso < 2:
            peso = 9
    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


def _verificar_cnpj(digitos: str) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CNPJ."""
    if len(digitos) != 14 or len(set(digitos)) == 1:
        return False
    base = digitos[:12]
    d1 = _digito_cnpj(base)
    d2 = _digito_cnpj(base + str(d1))
    return digitos == f"{base}{d1}{d2}"


def clean_document(raw: str) -> str:
    return _NAO_DIGITO.sub("", raw)


def validate_document(raw: str) -> DocumentType:
    """Classifica o documento como CPF ou CNPJ pelos digitos verificadores.

    Pontuacao e ignorada. CPF e testado antes de CNPJ.

    Raises:
        InvalidDocumentError: nenhum dos dois algoritmos confere.
    """
    digitos = clean_document(raw)
    if _verificar_cpf(digitos):
        return DocumentType.CPF
    if _verificar_cnpj(digitos):
        return DocumentType.CNPJ
    raise InvalidDocumentError()


@dataclass(frozen=True)
class Document:
    """Value Object imutavel para o documento do produtor (CPF ou CNPJ).

    CPF nunca aparece completo em repr (LGPD).
    """

    _valor: str
    _tipo: DocumentType

    def __init__(self, raw: str) -> None:
        tipo = validate_document(raw)
        object.__setattr__(self, "_valor", clean_document(raw))
        object.__setattr__(self, "_tipo", tipo)

    @property
    def valor(self) -> str:
        """Apenas digitos."""
        return self._valor

    @property
    def tipo(self) -> DocumentType:
        return self._tipo

    @property
    def formatted(self) -> str:
        d = self._valor
        if self._tipo is DocumentType.CPF:
            return f"{d[:3]}.{d[3:6]}.{d[6:9]}-{d[9:]}"
        return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:]}"

    @property
    def mascarado(self) -> str:
        """***.XXX.XXX-** para CPF; CNPJ e publico e sai formatado."""
        if self._tipo is DocumentType.CPF:
            d = self._valor
            return f"***.{d[3:6]}.{d[6:9]}-**"
        return self.formatted

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self._valor == other._valor

    def __hash__(self) -> int:
        return hash(self._valor)

    def __repr__(self) -> str:
        return f"Document({self._tipo.value}, {self.mascarado!r})"

    def __str__(self) -> str:
        return self.mascarado
