import io
import zipfile

import pytest

ODT_NAMESPACES = (
    'xmlns:office="urn:oasis:names:tc:opendocument:xmlns:office:1.0" '
    'xmlns:text="urn:oasis:names:tc:opendocument:xmlns:text:1.0"'
)
DOCX_NAMESPACES = 'xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main"'


def make_zip_bytesio(files: dict[str, bytes]) -> io.BytesIO:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name, data in files.items():
            zf.writestr(name, data)
    buffer.seek(0)
    return buffer


def odt_content(body: str) -> bytes:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f"<office:document-content {ODT_NAMESPACES}>"
        f"<office:body><office:text>{body}</office:text></office:body>"
        "</office:document-content>"
    ).encode("utf-8")


def docx_content(body: str) -> bytes:
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f"<w:document {DOCX_NAMESPACES}><w:body>{body}</w:body></w:document>"
    ).encode("utf-8")


def make_odt(body: str) -> io.BytesIO:
    return make_zip_bytesio(
        {
            "mimetype": b"application/vnd.oasis.opendocument.text",
            "content.xml": odt_content(body),
        }
    )


def make_docx(body: str) -> io.BytesIO:
    return make_zip_bytesio(
        {
            "[Content_Types].xml": b'<?xml version="1.0"?><Types/>',
            "word/document.xml": docx_content(body),
        }
    )


@pytest.fixture
def odt_xml():
    return odt_content


@pytest.fixture
def docx_xml():
    return docx_content


@pytest.fixture
def odt_file():
    return make_odt


@pytest.fixture
def docx_file():
    return make_docx


@pytest.fixture
def zip_file():
    return make_zip_bytesio
