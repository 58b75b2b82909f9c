import io
import logging
from unittest import TestCase

import pytest

import office2text
from office2text import (
    ContentNotFoundError,
    DocumentFormat,
    ExtractionStatus,
    InvalidContainerError,
    LimitedTextContent,
    LimitUnit,
    MalformedXmlError,
)
from office2text.extractors.ms_modern.docx_extractor import read_limited_docx
from office2text.extractors.open_office.odt_extractor import read_limited_odt

logger = logging.getLogger(__name__)

tc = TestCase()

ODT_BODY = (
    '<text:h text:outline-level="1">Quarterly   report</text:h>'
    "<text:p>Revenue grew <text:span>strongly</text:span> this quarter.</text:p>"
    "<text:p/>"
    "<text:p>Outlook:\n  stable</text:p>"
)
ODT_TEXT = "Quarterly report Revenue grew strongly this quarter. Outlook: stable"

DOCX_BODY = (
    "<w:p><w:r><w:t>Quarterly</w:t></w:r><w:r><w:t xml:space=\"preserve\"> report </w:t></w:r></w:p>"
    "<w:p><w:r><w:t>Straße über Ärger</w:t></w:r></w:p>"
)
DOCX_TEXT = "Quarterly report Straße über Ärger"


def test_read_limited_odt__complete(odt_file) -> None:
    result = read_limited_odt(odt_file(ODT_BODY), 1000)

    tc.assertIsInstance(result, LimitedTextContent)
    tc.assertEqual(ODT_TEXT, result.text)
    tc.assertEqual(ExtractionStatus.COMPLETE, result.status)
    tc.assertFalse(result.is_truncated)
    tc.assertEqual(len(ODT_TEXT), result.char_count)


def test_read_limited_odt__truncated(odt_file) -> None:
    result = read_limited_odt(odt_file(ODT_BODY), 20)

    tc.assertEqual(ODT_TEXT[:20], result.text)
    tc.assertTrue(result.is_truncated)
    tc.assertEqual(20, result.limit)
    tc.assertEqual(LimitUnit.CHARS, result.unit)


def test_read_limited_docx__complete(docx_file) -> None:
    result = read_limited_docx(docx_file(DOCX_BODY), 1000)

    tc.assertEqual(DOCX_TEXT, result.text)
    tc.assertEqual(ExtractionStatus.COMPLETE, result.status)


def test_read_limited_docx__multibyte_truncation(docx_file) -> None:
    result = read_limited_docx(docx_file(DOCX_BODY), 22)

    tc.assertEqual("Quarterly report Straß", result.text)
    tc.assertEqual("Quarterly report Straß".encode("utf-8"), result.content)
    tc.assertTrue(result.is_truncated)


def test_read_limited_docx__byte_limit(docx_file) -> None:
    # "ß" is two bytes; a limit ending inside it drops the whole character
    result = read_limited_docx(docx_file(DOCX_BODY), 22, unit=LimitUnit.BYTES)

    tc.assertEqual(b"Quarterly report Stra", result.content)
    tc.assertTrue(result.is_truncated)


def test_total_size(docx_file) -> None:
    buffer = docx_file(DOCX_BODY)
    size = buffer.getbuffer().nbytes

    tc.assertEqual(DOCX_TEXT, read_limited_docx(buffer, 1000, size).text)
    with pytest.raises(InvalidContainerError):
        read_limited_docx(buffer, 1000, size - 1)


def test_wrong_format_is_content_not_found(odt_file, docx_file) -> None:
    with pytest.raises(ContentNotFoundError):
        read_limited_docx(odt_file(ODT_BODY), 100)
    with pytest.raises(ContentNotFoundError):
        read_limited_odt(docx_file(DOCX_BODY), 100)


def test_not_a_zip_is_invalid_container() -> None:
    with pytest.raises(InvalidContainerError):
        read_limited_odt(io.BytesIO(b"%PDF-1.4 not a document"), 100)
    with pytest.raises(InvalidContainerError):
        read_limited_docx(io.BytesIO(b"%PDF-1.4 not a document"), 100)


def test_malformed_content(zip_file) -> None:
    buffer = zip_file(
        {
            "word/document.xml": (
                b'<w:document xmlns:w="urn:w"><w:body>'
                b"<w:p><w:r><w:t>Readable part</w:t></w:r></w:p>"
                b"<w:p><w:r><w:t>cut off"
            )
        }
    )

    with pytest.raises(MalformedXmlError) as exc_info:
        read_limited_docx(buffer, 1000)

    tc.assertEqual("Readable part", exc_info.value.partial_text)


def test_empty_document(odt_file) -> None:
    result = read_limited_odt(odt_file(""), 10)

    tc.assertEqual("", result.text)
    tc.assertEqual(ExtractionStatus.COMPLETE, result.status)


def test_extraction_interface(odt_file) -> None:
    result = read_limited_odt(odt_file(ODT_BODY), 1000, path="my/dummy/report.odt")

    tc.assertEqual([ODT_TEXT], list(result.iterator()))
    tc.assertEqual(ODT_TEXT, result.get_full_text())
    tc.assertEqual("report.odt", result.get_metadata().filename)
    tc.assertEqual(".odt", result.get_metadata().file_extension)


def test_to_dict(docx_file) -> None:
    result = read_limited_docx(docx_file(DOCX_BODY), 9)

    tc.assertEqual(
        {
            "text": "Quarterly",
            "status": "truncated",
            "limit": 9,
            "unit": "chars",
            "filename": None,
        },
        result.to_dict(),
    )


def test_read_limited_dispatches_on_format(odt_file, docx_file) -> None:
    tc.assertEqual(
        ODT_TEXT, office2text.read_limited(odt_file(ODT_BODY), 1000, DocumentFormat.ODT).text
    )
    tc.assertEqual(
        DOCX_TEXT,
        office2text.read_limited(docx_file(DOCX_BODY), 1000, DocumentFormat.DOCX).text,
    )


def test_read_limited_file(tmp_path, odt_file, docx_file) -> None:
    odt_path = tmp_path / "report.odt"
    odt_path.write_bytes(odt_file(ODT_BODY).getvalue())
    docx_path = tmp_path / "report.docx"
    docx_path.write_bytes(docx_file(DOCX_BODY).getvalue())

    odt = office2text.read_limited_file(odt_path, 1000)
    docx = office2text.read_limited_file(str(docx_path), 9)

    tc.assertEqual(ODT_TEXT, odt.text)
    tc.assertEqual("report.odt", odt.metadata.filename)
    tc.assertEqual("Quarterly", docx.text)
    tc.assertTrue(docx.is_truncated)


def test_read_limited_file__unsupported(tmp_path) -> None:
    path = tmp_path / "notes.txt"
    path.write_text("plain text")

    with pytest.raises(office2text.ExtractionFileFormatNotSupportedError):
        office2text.read_limited_file(path, 10)


def test_source_stream_is_left_open(odt_file) -> None:
    buffer = odt_file(ODT_BODY)

    read_limited_odt(buffer, 5)

    tc.assertFalse(buffer.closed)
