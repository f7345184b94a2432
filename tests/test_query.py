from unittest import TestCase

from wcpan.drive.rest._api import files
from wcpan.drive.rest._query import encode_query, percent_encode, to_query_text


class PercentEncodeTestCase(TestCase):
    def testAlphanumeric(self):
        self.assertEqual(percent_encode("abcXYZ019"), "abcXYZ019")

    def testReservedCharacters(self):
        self.assertEqual(percent_encode("a b"), "a%20b")
        self.assertEqual(percent_encode("a&b=c"), "a%26b%3Dc")
        self.assertEqual(percent_encode("-_.~"), "%2D%5F%2E%7E")
        self.assertEqual(percent_encode("/?#"), "%2F%3F%23")

    def testUtf8(self):
        self.assertEqual(percent_encode("é"), "%C3%A9")
        self.assertEqual(percent_encode("中"), "%E4%B8%AD")

    def testEmpty(self):
        self.assertEqual(percent_encode(""), "")


class QueryTextTestCase(TestCase):
    def testBool(self):
        self.assertEqual(to_query_text(True), "true")
        self.assertEqual(to_query_text(False), "false")

    def testInt(self):
        self.assertEqual(to_query_text(100), "100")
        self.assertEqual(to_query_text(0), "0")

    def testStr(self):
        self.assertEqual(to_query_text("abc"), "abc")


class EncodeQueryTestCase(TestCase):
    def testNoParameters(self):
        params = files.list_.bind({})
        self.assertEqual(encode_query(params), "")

    def testUnsetFieldsAreAbsent(self):
        params = files.list_.bind({"page_size": 10, "q": None})
        self.assertEqual(encode_query(params), "&pageSize=10")

    def testDescriptorOrder(self):
        params = files.list_.bind(
            {
                "q": "name = 'a'",
                "page_size": 10,
                "corpora": "user",
                "supports_all_drives": True,
            }
        )
        self.assertEqual(
            encode_query(params),
            "&corpora=user&pageSize=10&q=name%20%3D%20%27a%27&supportsAllDrives=true",
        )

    def testFalseIsPresent(self):
        params = files.get.bind({"file_id": "abc", "supports_all_drives": False})
        self.assertEqual(encode_query(params), "&supportsAllDrives=false")

    def testPathFieldsAreNotInQuery(self):
        params = files.get.bind({"file_id": "abc"})
        self.assertEqual(encode_query(params), "")

    def testRequiredFieldIsAppended(self):
        params = files.export.bind({"file_id": "abc", "mime_type": "text/plain"})
        self.assertEqual(encode_query(params), "&mimeType=text%2Fplain")

    def testDeterministic(self):
        kwargs = {"q": "a b", "page_size": 3, "spaces": "drive"}
        a = encode_query(files.list_.bind(kwargs))
        b = encode_query(files.list_.bind(dict(kwargs)))
        self.assertEqual(a, b)
