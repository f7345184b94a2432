from collections.abc import AsyncIterator
from unittest import IsolatedAsyncioTestCase, TestCase
from unittest.mock import AsyncMock, MagicMock

from wcpan.drive.rest._api import about, channels, files
from wcpan.drive.rest._response import RawResponse, check_shape, decode_json, interpret
from wcpan.drive.rest.exceptions import DecodeError, HttpError, SinkError
from wcpan.drive.rest.types import File


class InterpretTestCase(IsolatedAsyncioTestCase):
    async def asyncSetUp(self) -> None:
        from logging import CRITICAL, disable

        disable(CRITICAL)

    async def asyncTearDown(self) -> None:
        from logging import NOTSET, disable

        disable(NOTSET)

    async def testDecodeJson(self):
        rv = await interpret(files.get, RawResponse(200, {}, b'{"id":"abc"}'))
        self.assertEqual(rv, {"id": "abc"})

    async def testDecodeStreamedJson(self):
        body = chunks_of([b'{"id":', b'"abc"}'])
        rv = await interpret(files.get, RawResponse(200, {}, body))
        self.assertEqual(rv, {"id": "abc"})

    async def testNotFound(self):
        for body in (b"", b"<html>not json", b'{"error": {"code": 404}}'):
            with self.subTest(body=body):
                with self.assertRaises(HttpError) as cm:
                    await interpret(files.get, RawResponse(404, {}, body))
                self.assertEqual(cm.exception.status, 404)

    async def testErrorBodyIsNotRead(self):
        body = MagicMock()
        with self.assertRaises(HttpError):
            await interpret(files.download, RawResponse(500, {}, body), MagicMock())
        body.__aiter__.assert_not_called()

    async def testBadUtf8(self):
        with self.assertRaises(DecodeError):
            await interpret(about.get, RawResponse(200, {}, b"\xff\xfe"))

    async def testBadJson(self):
        with self.assertRaises(DecodeError):
            await interpret(about.get, RawResponse(200, {}, b"{"))

    async def testWrongShape(self):
        with self.assertRaises(DecodeError):
            await interpret(about.get, RawResponse(200, {}, b"[]"))
        with self.assertRaises(DecodeError):
            await interpret(files.get, RawResponse(200, {}, b'{"trashed":"no"}'))

    async def testEmpty(self):
        rv = await interpret(channels.stop, RawResponse(204, {}, b""))
        self.assertIsNone(rv)

    async def testEmptyWithContent(self):
        rv = await interpret(channels.stop, RawResponse(200, {}, b"not json"))
        self.assertIsNone(rv)

    async def testEmptyError(self):
        with self.assertRaises(HttpError):
            await interpret(channels.stop, RawResponse(403, {}, b""))

    async def testStreamInOrder(self):
        sink = MagicMock()
        body = chunks_of([b"a", b"bb", b"ccc"])
        rv = await interpret(files.download, RawResponse(200, {}, body), sink)
        self.assertIsNone(rv)
        self.assertEqual(
            [_.args[0] for _ in sink.write.call_args_list],
            [b"a", b"bb", b"ccc"],
        )

    async def testStreamToAsyncSink(self):
        sink = AsyncMock()
        body = chunks_of([b"a", b"b"])
        await interpret(files.export, RawResponse(200, {}, body), sink)
        self.assertEqual(sink.write.await_count, 2)

    async def testStreamIsNotDecoded(self):
        sink = MagicMock()
        body = chunks_of([b"\xff", b"{"])
        await interpret(files.download, RawResponse(200, {}, body), sink)
        self.assertEqual(sink.write.call_count, 2)

    async def testSinkError(self):
        sink = MagicMock()
        sink.write.side_effect = [None, OSError("disk full"), None]
        body = chunks_of([b"a", b"b", b"c"])
        with self.assertRaises(SinkError) as cm:
            await interpret(files.download, RawResponse(200, {}, body), sink)
        self.assertIsInstance(cm.exception.__cause__, OSError)
        self.assertEqual(sink.write.call_count, 2)


class ShapeTestCase(TestCase):
    def testMissingKeysAreFine(self):
        check_shape({}, File)

    def testNullIsFine(self):
        check_shape({"name": None}, File)

    def testUnknownKeysAreFine(self):
        check_shape({"somethingNew": 1}, File)

    def testKinds(self):
        check_shape(
            {
                "name": "a",
                "trashed": True,
                "parents": ["b"],
                "owners": [{}],
                "capabilities": {},
                "imageMediaMetadata": {},
            },
            File,
        )
        with self.assertRaises(DecodeError):
            check_shape({"parents": "b"}, File)
        with self.assertRaises(DecodeError):
            check_shape({"name": 1}, File)
        with self.assertRaises(DecodeError):
            check_shape({"capabilities": []}, File)

    def testDecodeWithoutShape(self):
        self.assertEqual(decode_json(b"[1, 2]"), [1, 2])


async def chunks_of(chunks: list[bytes]) -> AsyncIterator[bytes]:
    for chunk in chunks:
        yield chunk
