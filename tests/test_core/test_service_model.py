import copy
import unittest

import pytest

from aws_codegen.core import model
from aws_codegen.core.enums import Protocol, Signer, TimestampFormat
from aws_codegen.core.exceptions import UnsupportedProtocol, UnsupportedSigner
from aws_codegen.endpoints import GLOBAL, RegionalEndpoint

SERVICE_DESCRIPTION = {
    "version": "2.0",
    "metadata": {
        "apiVersion": "2012-08-10",
        "endpointPrefix": "dynamodb",
        "jsonVersion": "1.0",
        "protocol": "json",
        "serviceId": "DynamoDB",
        "signatureVersion": "v4",
        "targetPrefix": "DynamoDB_20120810",
    },
    "operations": {},
    "shapes": {},
}


class TestServiceDescriptor(unittest.TestCase):
    def setUp(self):
        self.description = copy.deepcopy(SERVICE_DESCRIPTION)

    def _descriptor(self, region=None):
        return model.ServiceModel(self.description).service_descriptor(region)

    def test_regional_descriptor_from_metadata(self):
        service = self._descriptor("eu-west-1")
        self.assertEqual(service.endpoint_prefix, "dynamodb")
        self.assertEqual(service.api_version, "2012-08-10")
        self.assertIs(service.protocol, Protocol.JSON)
        self.assertIs(service.signer, Signer.SIGN_V4)
        self.assertEqual(service.endpoint, RegionalEndpoint("eu-west-1"))
        self.assertEqual(service.target_prefix, "DynamoDB_20120810")
        self.assertEqual(service.json_version, "1.0")
        self.assertEqual(service.host, "dynamodb.eu-west-1.amazonaws.com")
        self.assertEqual(
            service.content_type, "application/x-amz-json-1.0; charset=utf-8"
        )
        self.assertIs(service.timestamp_format, TimestampFormat.UNIX_TIMESTAMP)

    def test_no_region_gives_global_descriptor(self):
        service = self._descriptor()
        self.assertEqual(service.endpoint, GLOBAL)
        self.assertEqual(service.region, "us-east-1")

    def test_global_endpoint_metadata_wins_over_region(self):
        self.description["metadata"]["globalEndpoint"] = "dynamodb.amazonaws.com"
        service = self._descriptor("eu-west-1")
        self.assertEqual(service.endpoint, GLOBAL)
        self.assertEqual(service.host, "dynamodb.amazonaws.com")

    def test_defaults_without_overrides(self):
        metadata = self.description["metadata"]
        del metadata["targetPrefix"]
        del metadata["jsonVersion"]
        service = self._descriptor()
        self.assertEqual(service.target_prefix, "AWSDYNAMODB_20120810")
        self.assertIsNone(service.json_version)

    def test_optional_overrides(self):
        self.description["metadata"].update(
            {
                "protocol": "rest-xml",
                "signingName": "s3",
                "timestampFormat": "rfc822",
                "xmlNamespace": {"uri": "http://s3.amazonaws.com/doc/2006-03-01/"},
                "signatureVersion": "s3v4",
            }
        )
        service = self._descriptor()
        self.assertIs(service.protocol, Protocol.REST_XML)
        self.assertIs(service.signer, Signer.SIGN_S3)
        self.assertEqual(service.signing_name, "s3")
        self.assertIs(service.timestamp_format, TimestampFormat.RFC822)
        self.assertEqual(
            service.xml_namespace, "http://s3.amazonaws.com/doc/2006-03-01/"
        )

    def test_xml_namespace_as_string(self):
        self.description["metadata"]["xmlNamespace"] = "http://example.com/doc/"
        self.assertEqual(self._descriptor().xml_namespace, "http://example.com/doc/")

    def test_first_supported_protocol_is_used(self):
        metadata = self.description["metadata"]
        metadata["protocol"] = "smithy-rpc-v2-cbor"
        metadata["protocols"] = ["smithy-rpc-v2-cbor", "json"]
        self.assertIs(self._descriptor().protocol, Protocol.JSON)

    def test_unsupported_protocol(self):
        self.description["metadata"]["protocol"] = "smithy-rpc-v2-cbor"
        with self.assertRaises(UnsupportedProtocol):
            self._descriptor()

    def test_unsupported_signer(self):
        self.description["metadata"]["signatureVersion"] = "v2"
        with self.assertRaises(UnsupportedSigner):
            self._descriptor()


def test_load_bundled_service_model():
    service_model = model.load_service_model("dynamodb")
    assert isinstance(service_model, model.ServiceModel)
    service = service_model.service_descriptor("us-west-2")
    assert service.endpoint_prefix == "dynamodb"
    assert service.protocol is Protocol.JSON
    assert service.host == "dynamodb.us-west-2.amazonaws.com"


@pytest.mark.parametrize("region", [None, "us-west-2"])
def test_load_global_service_model(region):
    service = model.load_service_model("iam").service_descriptor(region)
    assert service.endpoint == GLOBAL
    assert service.host == "iam.amazonaws.com"
    assert service.protocol is Protocol.QUERY
