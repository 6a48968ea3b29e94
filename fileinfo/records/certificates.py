"""Authenticode certificate table.

The table is produced by the upstream signature parser. The result model
keeps a reference to it instead of a copy; see
``ResultModel.set_certificate_table``.
"""
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class Certificate:
    subject: str = ""
    issuer: str = ""
    serial_number: str = ""
    valid_since: str = ""
    valid_until: str = ""
    sha1: str = ""
    sha256: str = ""
    public_key_algorithm: str = ""
    signature_algorithm: str = ""

    @classmethod
    def from_x509(cls, cert) -> "Certificate":
        """Copy the fields this model renders from a ``cryptography.x509.Certificate``."""
        from cryptography.hazmat.primitives import hashes

        not_before = getattr(cert, "not_valid_before_utc", None) or cert.not_valid_before
        not_after = getattr(cert, "not_valid_after_utc", None) or cert.not_valid_after
        return cls(
            subject=cert.subject.rfc4514_string(),
            issuer=cert.issuer.rfc4514_string(),
            serial_number=format(cert.serial_number, "x"),
            valid_since=not_before.strftime("%Y-%m-%d %H:%M:%S UTC"),
            valid_until=not_after.strftime("%Y-%m-%d %H:%M:%S UTC"),
            sha1=cert.fingerprint(hashes.SHA1()).hex(),
            sha256=cert.fingerprint(hashes.SHA256()).hex(),
            public_key_algorithm=_public_key_algorithm(cert),
            signature_algorithm=_signature_algorithm(cert),
        )


def _public_key_algorithm(cert) -> str:
    from cryptography.hazmat.primitives.asymmetric import dsa, ec, ed25519, rsa

    key = cert.public_key()
    if isinstance(key, rsa.RSAPublicKey):
        return "RSA"
    if isinstance(key, ec.EllipticCurvePublicKey):
        return "ECDSA"
    if isinstance(key, dsa.DSAPublicKey):
        return "DSA"
    if isinstance(key, ed25519.Ed25519PublicKey):
        return "Ed25519"
    return ""


def _signature_algorithm(cert) -> str:
    hash_algorithm = cert.signature_hash_algorithm
    if hash_algorithm is None:
        return ""
    return f"{_public_key_algorithm(cert)}-{hash_algorithm.name.upper()}".lstrip("-")


class CertificateTable:
    """Certificates of an embedded signature in the order the parser found them."""

    def __init__(self, certificates: Optional[List[Certificate]] = None,
                 signer_index: Optional[int] = None,
                 counter_signer_index: Optional[int] = None):
        self.certificates: List[Certificate] = list(certificates or [])
        self.signer_index = signer_index
        self.counter_signer_index = counter_signer_index

    def add_certificate(self, certificate: Certificate) -> None:
        self.certificates.append(certificate)

    def get_number_of_certificates(self) -> int:
        return len(self.certificates)

    def get_certificate(self, position: int) -> Certificate:
        return self.certificates[position]

    def has_signer(self) -> bool:
        return self.signer_index is not None

    def has_counter_signer(self) -> bool:
        return self.counter_signer_index is not None

    def get_signer(self) -> Optional[Certificate]:
        if self.signer_index is None:
            return None
        return self.certificates[self.signer_index]

    def __len__(self):
        return len(self.certificates)
