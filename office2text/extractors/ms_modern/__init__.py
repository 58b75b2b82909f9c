"""
Modern Microsoft Office Extractor Package
==========================================

Limited text extraction for Office Open XML word-processing documents
(.docx, Word 2007 and later).

File Format Background
----------------------
Office Open XML (OOXML) stores documents as ZIP archives of XML parts
(ISO/IEC 29500):

    document.docx/
    ├── [Content_Types].xml    # MIME types for parts
    ├── _rels/
    │   └── .rels              # Package relationships
    ├── docProps/
    │   └── core.xml           # Title, author, dates
    └── word/
        ├── document.xml       # Main content, the only part read here
        └── styles.xml         # Style definitions

XML Namespaces:
    - http://schemas.openxmlformats.org/wordprocessingml/2006/main (w:)
"""

from office2text.extractors.ms_modern.docx_extractor import read_limited_docx

__all__ = ["read_limited_docx"]
