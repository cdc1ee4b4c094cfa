import unittest

import mimetree.header
import mimetree.part
from mimetree.errors import MediaTypeSyntaxError


class TestResolve(unittest.TestCase):

    def test_content_type(self):
        meta = mimetree.part.resolve('Text/Plain; charset="utf-8"')
        self.assertEqual(meta.content_type, "text/plain")
        self.assertEqual(meta.params, { "charset": "utf-8" })
        self.assertEqual(meta.disposition, "")
        self.assertEqual(meta.file_name, "")
        self.assertEqual(meta.errors, ())

    def test_disposition_file_name(self):
        meta = mimetree.part.resolve('text/plain; name="b.txt"',
                                     'attachment; filename="a.txt"')
        self.assertEqual(meta.disposition, "attachment")
        self.assertEqual(meta.file_name, "a.txt")

    def test_type_name(self):
        meta = mimetree.part.resolve('text/plain; name="b.txt"')
        self.assertEqual(meta.file_name, "b.txt")
        meta = mimetree.part.resolve('text/plain; name="b.txt"', 'inline')
        self.assertEqual(meta.disposition, "inline")
        self.assertEqual(meta.file_name, "b.txt")

    def test_encoded_file_name(self):
        meta = mimetree.part.resolve('application/pdf; name="=?utf-8?q?caf=C3=A9.pdf?="')
        self.assertEqual(meta.file_name, "caf\u00e9.pdf")
        self.assertEqual(meta.errors, ())

    def test_no_file_name(self):
        meta = mimetree.part.resolve('text/plain', 'attachment')
        self.assertEqual(meta.file_name, "")

    def test_bad_disposition(self):
        meta = mimetree.part.resolve('text/plain; name="b.txt"',
                                     'attachment; filename="a.txt')
        self.assertEqual(meta.content_type, "text/plain")
        self.assertEqual(meta.disposition, "")
        self.assertEqual(meta.file_name, "b.txt")
        self.assertEqual(meta.errors, ("disposition-syntax", ))

    def test_bad_content_type(self):
        with self.assertRaises(MediaTypeSyntaxError):
            mimetree.part.resolve('text/plain; charset="unterminated',
                                  'attachment; filename="a.txt"')
        with self.assertRaises(MediaTypeSyntaxError):
            mimetree.part.resolve(None)


class TestPart(unittest.TestCase):

    def make_tree(self):
        root = mimetree.part.Part(None, mimetree.header.Header([ ("Content-Type", "multipart/mixed; boundary=x"),
                                                                 ("Subject", "=?utf-8?q?Caf=C3=A9?=") ]))
        root._content_type = "multipart/mixed"
        first = mimetree.part.Part(root, mimetree.header.Header())
        first._content_type = "text/plain"
        first._content = b"hello"
        second = mimetree.part.Part(root, mimetree.header.Header())
        second._content_type = "multipart/alternative"
        leaf = mimetree.part.Part(second, mimetree.header.Header())
        leaf._content_type = "text/html"
        root._first_child = first
        first._next_sibling = second
        second._first_child = leaf
        return root, first, second, leaf

    def test_children(self):
        root, first, second, leaf = self.make_tree()
        self.assertEqual(list(root.children()), [ first, second ])
        self.assertEqual(list(second.children()), [ leaf ])
        self.assertEqual(list(leaf.children()), [])

    def test_walk(self):
        root, first, second, leaf = self.make_tree()
        self.assertEqual(list(root.walk()), [ (root, ()),
                                              (first, (root, )),
                                              (second, (root, )),
                                              (leaf, (root, second)) ])

    def test_accessors(self):
        root, first, second, leaf = self.make_tree()
        self.assertIsNone(root.parent)
        self.assertIs(leaf.parent, second)
        self.assertTrue(root.is_multipart())
        self.assertFalse(first.is_multipart())
        self.assertEqual(first.content, b"hello")
        self.assertEqual(second.content, b"")
        self.assertEqual(root.get_header("subject"), "=?utf-8?q?Caf=C3=A9?=")
        self.assertIsNone(root.get_header("X-Missing"))
        self.assertEqual(root.get_all_headers("Subject"), [ "=?utf-8?q?Caf=C3=A9?=" ])
        self.assertEqual(root.decoded_header("Subject"), "Café")

    def test_read_only(self):
        root, first, second, leaf = self.make_tree()
        with self.assertRaises(AttributeError):
            first.content = b"other"
        with self.assertRaises(AttributeError):
            root.first_child = None

    def test_errors(self):
        root, first, second, leaf = self.make_tree()
        first.add_error("disposition-syntax")
        self.assertEqual(first.errors, ("disposition-syntax", ))
        self.assertEqual(second.errors, ())

    def test_abstract(self):
        part = mimetree.part.AbstractPart()
        with self.assertRaises(NotImplementedError):
            part.content
