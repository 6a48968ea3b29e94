"""Tests for the Authenticode certificate table adapter."""
import datetime
import struct
from types import SimpleNamespace

import pytest

pytest.importorskip("pefile", reason="pefile not installed")
pytest.importorskip("cryptography", reason="cryptography not installed")

from cryptography import x509
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.serialization import Encoding, pkcs7
from cryptography.x509.oid import NameOID

from fileinfo.parsers.pe import _leaf_indices, _populate_certificates
from fileinfo.records.certificates import Certificate

SECURITY_DIRECTORY_INDEX = 4
SIGNATURE_OFFSET = 0x10


def _name(common_name):
    return x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)])


def _issue(subject, issuer, issuer_key, serial):
    key = ec.generate_private_key(ec.SECP256R1())
    now = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(_name(subject))
        .issuer_name(_name(issuer))
        .public_key(key.public_key())
        .serial_number(serial)
        .not_valid_before(now)
        .not_valid_after(now + datetime.timedelta(days=365))
        .sign(issuer_key or key, hashes.SHA256())
    )
    return cert, key


@pytest.fixture(scope="module")
def chain():
    root_key = ec.generate_private_key(ec.SECP256R1())
    root, _ = _issue("Test Root", "Test Root", root_key, 1)
    leaf, leaf_key = _issue("Test Signer", "Test Root", root_key, 2)
    return root, leaf, leaf_key


def _fake_pe(data, offset, size):
    directories = [SimpleNamespace(VirtualAddress=0, Size=0) for _ in range(16)]
    directories[SECURITY_DIRECTORY_INDEX] = SimpleNamespace(VirtualAddress=offset, Size=size)
    return SimpleNamespace(OPTIONAL_HEADER=SimpleNamespace(DATA_DIRECTORY=directories), __data__=data)


def _signed_pe(der, cert_type=0x0002):
    win_certificate = struct.pack("<IHH", 8 + len(der), 0x0200, cert_type) + der
    data = b"\x00" * SIGNATURE_OFFSET + win_certificate
    return _fake_pe(data, SIGNATURE_OFFSET, len(win_certificate))


def _pkcs7_der(signer_cert, signer_key, extra_certs=()):
    builder = pkcs7.PKCS7SignatureBuilder().set_data(b"image digest").add_signer(
        signer_cert, signer_key, hashes.SHA256(),
    )
    for cert in extra_certs:
        builder = builder.add_certificate(cert)
    return builder.sign(Encoding.DER, [pkcs7.PKCS7Options.DetachedSignature])


# ---------------------------------------------------------------------------
# Certificate records
# ---------------------------------------------------------------------------

class TestCertificateFromX509:
    def test_fields(self, chain):
        root, leaf, _ = chain
        cert = Certificate.from_x509(leaf)
        assert cert.subject == "CN=Test Signer"
        assert cert.issuer == "CN=Test Root"
        assert cert.serial_number == "2"
        assert cert.valid_since == "2024-01-01 00:00:00 UTC"
        assert cert.public_key_algorithm == "ECDSA"
        assert cert.signature_algorithm == "ECDSA-SHA256"
        assert len(cert.sha256) == 64


class TestLeafIndices:
    def test_chain(self):
        certs = [Certificate(subject="CN=root", issuer="CN=root"),
                 Certificate(subject="CN=leaf", issuer="CN=root")]
        assert _leaf_indices(certs) == [1]

    def test_lone_self_signed(self):
        assert _leaf_indices([Certificate(subject="CN=me", issuer="CN=me")]) == [0]

    def test_two_chains(self):
        certs = [Certificate(subject="CN=signer", issuer="CN=ca"),
                 Certificate(subject="CN=ca", issuer="CN=ca"),
                 Certificate(subject="CN=tsa", issuer="CN=tsa-ca")]
        assert _leaf_indices(certs) == [0, 2]


# ---------------------------------------------------------------------------
# _populate_certificates
# ---------------------------------------------------------------------------

class TestPopulateCertificates:
    def test_signed_image(self, model, chain):
        root, leaf, leaf_key = chain
        _populate_certificates(model, _signed_pe(_pkcs7_der(leaf, leaf_key, [root])))
        assert model.is_signature_present()
        assert not model.is_signature_verified()
        table = model.get_certificate_table()
        assert table.get_number_of_certificates() == 2
        assert table.get_signer().subject == "CN=Test Signer"
        assert not table.has_counter_signer()

    def test_no_security_directory(self, model):
        _populate_certificates(model, _fake_pe(b"\x00" * 64, 0, 0))
        assert not model.is_signature_present()
        assert model.get_certificate_table() is None

    def test_unsupported_certificate_type(self, model, chain):
        _, leaf, leaf_key = chain
        _populate_certificates(model, _signed_pe(_pkcs7_der(leaf, leaf_key), cert_type=0x0001))
        assert model.is_signature_present()
        assert model.get_certificate_table() is None
