"""Test cases for front matter parsing."""

import datetime
import os
import tempfile
import unittest

from postlib.frontmatter import Document, FrontMatterError, load_document, parse_document


class ParseDocumentTest(unittest.TestCase):

    def test_metadata_and_body(self):
        doc = parse_document('---\ntitle: "T"\nauthor: Ada\n---\nHello\n')
        self.assertEqual(doc.metadata, {"title": "T", "author": "Ada"})
        self.assertEqual(doc.body, "Hello\n")
        self.assertEqual(doc.title, "T")

    def test_no_front_matter(self):
        doc = parse_document("# Heading\n\nText\n")
        self.assertEqual(doc.metadata, {})
        self.assertEqual(doc.body, "# Heading\n\nText\n")

    def test_empty_front_matter(self):
        doc = parse_document("---\n---\nBody")
        self.assertEqual(doc.metadata, {})
        self.assertEqual(doc.body, "Body")

    def test_crlf_and_dots_terminator(self):
        doc = parse_document("---\r\ntitle: T\r\n...\r\nBody")
        self.assertEqual(doc.title, "T")
        self.assertEqual(doc.body, "Body")

    def test_horizontal_rule_in_body_is_not_front_matter(self):
        doc = parse_document("Intro\n\n---\n\nMore\n")
        self.assertEqual(doc.metadata, {})

    def test_missing_title_defaults(self):
        self.assertEqual(parse_document("---\nauthor: Ada\n---\nx").title, "Untitled")
        self.assertEqual(parse_document("---\ntitle: ''\n---\nx").title, "Untitled")

    def test_values_as_text(self):
        doc = parse_document("---\ndate: 2024-03-01\nread_time: 5\n---\n")
        self.assertEqual(doc.metadata["date"], datetime.date(2024, 3, 1))
        self.assertEqual(doc.value("date"), "2024-03-01")
        self.assertEqual(doc.value("read_time"), "5")
        self.assertEqual(doc.value("subtitle"), "")

    def test_non_mapping_front_matter(self):
        with self.assertRaises(FrontMatterError):
            parse_document("---\n- a\n- b\n---\nBody")

    def test_invalid_yaml(self):
        with self.assertRaises(FrontMatterError):
            parse_document("---\ntitle: [unclosed\n---\nBody")

    def test_document_is_immutable(self):
        doc = Document(metadata={}, body="x")
        with self.assertRaises(AttributeError):
            doc.body = "y"

    def test_metadata_is_read_only(self):
        source = {"title": "T"}
        doc = Document(metadata=source, body="x")
        with self.assertRaises(TypeError):
            doc.metadata["title"] = "Changed"
        source["title"] = "Changed"
        self.assertEqual(doc.title, "T")

    def test_parsed_metadata_is_read_only(self):
        doc = parse_document("---\ntitle: T\n---\nBody")
        with self.assertRaises(TypeError):
            doc.metadata["author"] = "Ada"


class LoadDocumentTest(unittest.TestCase):

    def test_load_from_disk(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "post.md")
            with open(path, "w", encoding="utf-8") as f:
                f.write("---\ntitle: Café\n---\nBody")
            doc = load_document(path)
            self.assertEqual(doc.title, "Café")
            self.assertEqual(doc.source_path, path)
            self.assertEqual(doc.source_dir, os.path.abspath(tmp))

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_document("/nonexistent/post.md")


if __name__ == "__main__":
    unittest.main()
