#!/usr/bin/env python3
"""
Test suite for web bodies and request entities
"""
import unittest

from xsparse.core.errors import UnsupportedEncodingError
from xsparse.core.request_parser import RequestMessageParser
from xsparse.features.web_entity import TupleList, WebBody, WebEntityRequest, is_web_body


class WebBodyTests(unittest.TestCase):
    def test_string_content(self):
        body = WebBody('<a/>')
        self.assertEqual(body.retrieve_content(), '<a/>')
        self.assertEqual(body.as_bytes(), b'<a/>')
        self.assertTrue(is_web_body(body))

    def test_bytes_content(self):
        body = WebBody(bytearray('é'.encode('latin-1')))
        self.assertEqual(body.retrieve_content(), b'\xe9')
        self.assertEqual(body.as_string('latin1'), 'é')

    def test_undecodable_bytes_are_replaced(self):
        self.assertEqual(WebBody(b'a\xffb').as_string(), 'a\ufffdb')
        self.assertEqual(WebBody(b'\xe9\x80').as_string('ascii'), '\ufffd\ufffd')

    def test_unsupported_encoding(self):
        with self.assertRaises(UnsupportedEncodingError):
            WebBody(b'x').as_string('klingon')

    def test_invalid_content(self):
        with self.assertRaises(TypeError):
            WebBody(42)


class TupleListTests(unittest.TestCase):
    def test_list_values_fan_out(self):
        tuples = TupleList({'a': ['1', '2'], 'b': '3'})
        self.assertEqual(list(tuples), [('a', '1'), ('a', '2'), ('b', '3')])
        self.assertEqual(tuples.get('a'), '1')
        self.assertEqual(tuples.get_all('a'), ['1', '2'])
        self.assertIsNone(tuples.get('missing'))
        self.assertIn('b', tuples)
        self.assertEqual(tuples[2], ('b', '3'))
        self.assertEqual(len(tuples), 3)


class WebEntityRequestTests(unittest.TestCase):
    def test_from_parsed(self):
        """Test parameters combine query parameters and form fields"""
        parsed = RequestMessageParser().parse(
            'POST /submit?mode=fast HTTP/1.1\r\n'
            'Content-Type: application/x-www-form-urlencoded\r\n'
            '\r\n'
            'x=1&mode=slow'
        )
        entity = WebEntityRequest.from_parsed(parsed)
        self.assertEqual(list(entity.parameters), [('mode', 'fast'), ('x', '1'), ('mode', 'slow')])
        self.assertEqual(entity.headers.get('content-type'), 'application/x-www-form-urlencoded')
        self.assertEqual(entity.body.retrieve_content(), 'x=1&mode=slow')

    def test_empty_body(self):
        parsed = RequestMessageParser().parse('GET / HTTP/1.1\r\n\r\n')
        self.assertIsNone(WebEntityRequest.from_parsed(parsed).body)

    def test_create(self):
        entity = WebEntityRequest.create({'host': 'x'}, {'p': '1'}, b'data')
        self.assertEqual(entity.headers.get('host'), 'x')
        self.assertEqual(entity.parameters.get('p'), '1')
        self.assertEqual(entity.body.retrieve_content(), b'data')


if __name__ == '__main__':
    unittest.main()
