from unittest import TestCase

from wcpan.drive.rest._api import about, channels, drives, files
from wcpan.drive.rest._lib import ANY_READ_SCOPES
from wcpan.drive.rest._request import Credentials, build_request, serialize_json
from wcpan.drive.rest.exceptions import InputDataError


_CREDENTIALS = Credentials(token="tok", scopes=ANY_READ_SCOPES)


class BuildRequestTestCase(TestCase):
    def testNoParameterGet(self):
        rv = build_request(about.get, about.get.bind({}), _CREDENTIALS)
        self.assertEqual(rv.method, "GET")
        self.assertEqual(
            rv.url,
            "https://www.googleapis.com/drive/v3/about?oauth_token=tok&fields=*",
        )
        self.assertEqual(rv.headers, {"Content-Type": "application/json"})
        self.assertEqual(rv.body, "")

    def testPathIsNotEscaped(self):
        params = files.get.bind({"file_id": "a/b c", "supports_all_drives": True})
        rv = build_request(files.get, params, _CREDENTIALS)
        self.assertEqual(
            rv.url,
            "https://www.googleapis.com/drive/v3/files/a/b c"
            "?oauth_token=tok&fields=*&supportsAllDrives=true",
        )

    def testRequiredQuery(self):
        params = drives.create.bind({"request_id": "r-1"})
        rv = build_request(drives.create, params, _CREDENTIALS, {"name": "d"})
        self.assertEqual(
            rv.url,
            "https://www.googleapis.com/drive/v3/drives"
            "?oauth_token=tok&fields=*&requestId=r%2D1",
        )
        self.assertEqual(rv.body, '{"name":"d"}')

    def testUpload(self):
        data = b"\x00" * 1024
        params = files.create_upload.bind({})
        rv = build_request(files.create_upload, params, _CREDENTIALS, data)
        self.assertEqual(rv.method, "POST")
        self.assertEqual(
            rv.url,
            "https://www.googleapis.com/upload/drive/v3/files"
            "?uploadType=media&oauth_token=tok&fields=*",
        )
        self.assertEqual(rv.headers, {"Content-Length": "1024"})
        self.assertNotIn("Content-Type", rv.headers)
        self.assertEqual(rv.body, data)

    def testUpdateUploadSubstitutesPath(self):
        params = files.update_upload.bind({"file_id": "abc"})
        rv = build_request(files.update_upload, params, _CREDENTIALS, b"x")
        self.assertEqual(
            rv.url,
            "https://www.googleapis.com/upload/drive/v3/files/abc"
            "?uploadType=media&oauth_token=tok&fields=*",
        )

    def testUploadRequiresBytes(self):
        params = files.create_upload.bind({})
        with self.assertRaises(InputDataError):
            build_request(files.create_upload, params, _CREDENTIALS, "text")

    def testDownload(self):
        params = files.download.bind({"file_id": "abc"})
        rv = build_request(files.download, params, _CREDENTIALS)
        self.assertEqual(
            rv.url,
            "https://www.googleapis.com/drive/v3/files/abc"
            "?alt=media&oauth_token=tok&fields=*",
        )

    def testCustomRoot(self):
        rv = build_request(
            about.get,
            about.get.bind({}),
            _CREDENTIALS,
            api_root="http://localhost:1234/",
        )
        self.assertEqual(rv.url, "http://localhost:1234/about?oauth_token=tok&fields=*")

    def testEmptyPayload(self):
        params = channels.stop.bind({})
        for payload in (None, {}, {"id": None}):
            with self.subTest(payload=payload):
                rv = build_request(channels.stop, params, _CREDENTIALS, payload)
                self.assertEqual(rv.body, "")
                self.assertEqual(rv.headers, {"Content-Type": "application/json"})

    def testBodyNotAccepted(self):
        with self.assertRaises(InputDataError):
            build_request(about.get, about.get.bind({}), _CREDENTIALS, {"a": 1})

    def testUnserializableBody(self):
        with self.assertRaises(InputDataError):
            build_request(channels.stop, channels.stop.bind({}), _CREDENTIALS, {1j})

    def testIdempotent(self):
        kwargs = {"file_id": "abc", "add_parents": "p1"}
        body = {"name": "a", "description": None}
        a = build_request(files.update, files.update.bind(kwargs), _CREDENTIALS, body)
        b = build_request(files.update, files.update.bind(kwargs), _CREDENTIALS, body)
        self.assertEqual(a, b)
        self.assertEqual(a.body, '{"name":"a"}')


class SerializeJsonTestCase(TestCase):
    def testSentinels(self):
        self.assertEqual(serialize_json(None), "")
        self.assertEqual(serialize_json({}), "")
        self.assertEqual(serialize_json({"a": None}), "")

    def testNestedNone(self):
        self.assertEqual(
            serialize_json({"a": {"b": None, "c": 1}, "d": [{"e": None}]}),
            '{"a":{"c":1},"d":[{}]}',
        )

    def testUnicode(self):
        self.assertEqual(serialize_json({"name": "中"}), '{"name":"中"}')
