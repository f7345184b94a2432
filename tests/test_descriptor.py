from unittest import TestCase

from wcpan.drive.rest._api import RESOURCES, find_operation, iter_operations
from wcpan.drive.rest._descriptor import (
    BodyKind,
    OperationDescriptor,
    ResponseKind,
    optional,
    path,
    required,
)
from wcpan.drive.rest._lib import (
    ANY_READ_SCOPES,
    FILE_READ_SCOPES,
    SCOPE_DRIVE,
    UPDATE_SCOPES,
)
from wcpan.drive.rest.exceptions import InputDataError


class TableTestCase(TestCase):
    def testOperationCount(self):
        self.assertEqual(len(list(iter_operations())), 49)

    def testResources(self):
        self.assertEqual(
            sorted(RESOURCES),
            [
                "about",
                "changes",
                "channels",
                "comments",
                "drives",
                "files",
                "permissions",
                "replies",
                "revisions",
                "teamdrives",
            ],
        )

    def testNamesMatchTable(self):
        for resource, operations in RESOURCES.items():
            for name, descriptor in operations.items():
                self.assertEqual(descriptor.name, f"{resource}.{name}")

    def testInvariants(self):
        for descriptor in iter_operations():
            with self.subTest(name=descriptor.name):
                path_names = sorted(_.name for _ in descriptor.path_fields)
                self.assertEqual(path_names, sorted(descriptor.placeholders))
                self.assertTrue(descriptor.scopes)
                if descriptor.is_upload:
                    self.assertIn(("uploadType", "media"), descriptor.fixed_query)
                if descriptor.response is not ResponseKind.JSON:
                    self.assertIsNone(descriptor.shape)
                else:
                    self.assertIsNotNone(descriptor.shape)
                wire_names = [_.name for _ in descriptor.query_fields]
                self.assertEqual(len(wire_names), len(set(wire_names)))
                self.assertNotIn("oauth_token", wire_names)
                self.assertNotIn("fields", wire_names)

    def testRequiredFieldsComeLast(self):
        for descriptor in iter_operations():
            with self.subTest(name=descriptor.name):
                flags = [_.required for _ in descriptor.query_fields]
                self.assertEqual(flags, sorted(flags))

    def testExportPath(self):
        export = find_operation("files.export")
        self.assertEqual(export.path, "files/{fileId}/export")
        self.assertIs(export.response, ResponseKind.STREAM)

    def testUploadScopes(self):
        self.assertEqual(find_operation("files.update_upload").scopes, UPDATE_SCOPES)
        self.assertEqual(
            find_operation("files.create_upload").scopes,
            find_operation("files.create").scopes,
        )

    def testDefaultScopes(self):
        self.assertEqual(find_operation("about.get").scopes, ANY_READ_SCOPES)
        self.assertEqual(find_operation("comments.get").scopes, FILE_READ_SCOPES)
        self.assertEqual(
            find_operation("files.empty_trash").scopes, frozenset([SCOPE_DRIVE])
        )

    def testUnknownOperation(self):
        with self.assertRaises(KeyError):
            find_operation("files.nothing")
        with self.assertRaises(KeyError):
            find_operation("nothing")


class ConstructionTestCase(TestCase):
    def testMissingPathField(self):
        with self.assertRaises(ValueError):
            OperationDescriptor(
                name="x.get",
                method="GET",
                path="x/{xId}",
                scopes=ANY_READ_SCOPES,
            )

    def testExtraPathField(self):
        with self.assertRaises(ValueError):
            OperationDescriptor(
                name="x.get",
                method="GET",
                path="x",
                scopes=ANY_READ_SCOPES,
                query=(path("x_id", "xId"),),
            )

    def testDuplicatedWireName(self):
        with self.assertRaises(ValueError):
            OperationDescriptor(
                name="x.list",
                method="GET",
                path="x",
                scopes=ANY_READ_SCOPES,
                query=(optional("a", "q"), optional("b", "q")),
            )

    def testReservedName(self):
        for name in ("oauth_token", "fields"):
            with self.subTest(name=name), self.assertRaises(ValueError):
                OperationDescriptor(
                    name="x.list",
                    method="GET",
                    path="x",
                    scopes=ANY_READ_SCOPES,
                    query=(optional("a", name),),
                )

    def testFixedQueryCollision(self):
        with self.assertRaises(ValueError):
            OperationDescriptor(
                name="x.get",
                method="GET",
                path="x",
                scopes=ANY_READ_SCOPES,
                query=(optional("alt", "alt"),),
                fixed_query=(("alt", "media"),),
                response=ResponseKind.STREAM,
            )

    def testMediaWithoutUploadType(self):
        with self.assertRaises(ValueError):
            OperationDescriptor(
                name="x.upload",
                method="POST",
                path="x",
                scopes=ANY_READ_SCOPES,
                body=BodyKind.MEDIA,
            )

    def testStreamWithShape(self):
        with self.assertRaises(ValueError):
            OperationDescriptor(
                name="x.download",
                method="GET",
                path="x",
                scopes=ANY_READ_SCOPES,
                response=ResponseKind.STREAM,
                shape=dict,
            )

    def testPlaceholders(self):
        descriptor = OperationDescriptor(
            name="x.get",
            method="GET",
            path="a/{aId}/b/{bId}",
            scopes=ANY_READ_SCOPES,
            query=(path("a_id", "aId"), path("b_id", "bId")),
        )
        self.assertEqual(descriptor.placeholders, ("aId", "bId"))


class BindTestCase(TestCase):
    def setUp(self):
        self._descriptor = OperationDescriptor(
            name="x.list",
            method="GET",
            path="x/{xId}",
            scopes=ANY_READ_SCOPES,
            query=(
                path("x_id", "xId"),
                optional("page_size", "pageSize", int),
                optional("flag", "flag", bool),
                required("token", "token"),
            ),
        )

    def testBind(self):
        rv = self._descriptor.bind({"x_id": "abc", "token": "t", "page_size": 5})
        self.assertEqual(rv.path, {"xId": "abc"})
        self.assertEqual(
            [(f.name, v) for f, v in rv.query],
            [("pageSize", 5), ("flag", None), ("token", "t")],
        )

    def testUnknownKeyword(self):
        with self.assertRaises(TypeError):
            self._descriptor.bind({"x_id": "abc", "token": "t", "nope": 1})

    def testMissingRequired(self):
        with self.assertRaises(InputDataError):
            self._descriptor.bind({"x_id": "abc"})

    def testMissingPath(self):
        with self.assertRaises(InputDataError):
            self._descriptor.bind({"token": "t"})

    def testEmptyPath(self):
        with self.assertRaises(InputDataError):
            self._descriptor.bind({"x_id": "", "token": "t"})

    def testWrongType(self):
        with self.assertRaises(InputDataError):
            self._descriptor.bind({"x_id": "abc", "token": "t", "page_size": "5"})
        with self.assertRaises(InputDataError):
            self._descriptor.bind({"x_id": "abc", "token": "t", "flag": "true"})

    def testBoolIsNotInt(self):
        with self.assertRaises(InputDataError):
            self._descriptor.bind({"x_id": "abc", "token": "t", "page_size": True})

    def testInputDataErrorIsValueError(self):
        with self.assertRaises(ValueError):
            self._descriptor.bind({"x_id": "abc"})
