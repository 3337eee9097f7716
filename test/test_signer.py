import re
import unittest

from datetime import datetime, timezone

from awssigner.modules.client.keyderivation import KeyDerivationChain
from awssigner.modules.client.signer import Signer
from awssigner.modules.crypto.primitives import hmac_sha256, sha256_hex
from awssigner.modules.signingcontext import SigningContext


class SignerTest(unittest.TestCase):

    def setUp(self):
        self.signer = Signer()
        self.context = SigningContext("us-east-1", "dynamodb", datetime(2021, 1, 1, tzinfo=timezone.utc))
        self.signing_key = KeyDerivationChain().derive_key("secretkey", "20210101", "us-east-1", "dynamodb")

    def test_get_string_to_sign_sequence(self):
        canonical_request_hash = sha256_hex("testing&canonical&request")
        string_to_sign = self.signer._build_string_to_sign("20210101T000000Z", "testing/credential/scope",
                                                           canonical_request_hash)
        expected_string_to_sign = "AWS4-HMAC-SHA256\n20210101T000000Z\ntesting/credential/scope\n" + canonical_request_hash
        self.assertEqual(expected_string_to_sign, string_to_sign)

    def test_sign_returns_authorization_date_and_scope(self):
        authorization, amz_date, credential_scope = self.signer.sign(sha256_hex(""), self.context, self.signing_key,
                                                                     "examplekey", "host;x-amz-date")
        self.assertEqual("20210101T000000Z", amz_date)
        self.assertEqual("20210101/us-east-1/dynamodb/aws4_request", credential_scope)
        pattern = re.compile(r"^AWS4-HMAC-SHA256 Credential=examplekey/20210101/us-east-1/dynamodb/aws4_request, "
                             r"SignedHeaders=host;x-amz-date, Signature=[0-9a-f]{64}$")
        self.assertTrue(pattern.match(authorization), authorization)

    def test_signature_is_hex_hmac_of_string_to_sign(self):
        canonical_request_hash = sha256_hex("canonical request")
        authorization, _, _ = self.signer.sign(canonical_request_hash, self.context, self.signing_key, "examplekey", "host")
        string_to_sign = "AWS4-HMAC-SHA256\n20210101T000000Z\n20210101/us-east-1/dynamodb/aws4_request\n" \
            + canonical_request_hash
        expected_signature = hmac_sha256(self.signing_key, string_to_sign).hex()
        self.assertTrue(authorization.endswith(", Signature=" + expected_signature))

    # regression tests
    def test_sign(self):
        data = "testing&canonical&request"
        historical_result = b"\xfb\xd2\x86\x87&\xdaC\x03\x98\x9dIC\xcbP?\xa8\\\xfeJ\x82\x03\xe6w\xd4\x963Q\xfd\xe5-\xdb\xcf"
        self.assertEqual(historical_result, hmac_sha256("secret_key", data))

    def test_create_request_signature(self):
        # Warning: changing any of these parameters here will cause regression tests to fail!
        canonical_querystring = "Action=PutMetricData&Version=2010-08-01&Namespace=TestNamespace&" \
            "MetricData.member.1.MetricName=buffers&MetricData.member.1.Unit=Bytes&MetricData.member.1.Value=231434333" \
            "&MetricData.member.1.Dimensions.member.1.Name=InstanceType&MetricData.member.1.Dimensions.member.1.Value=m1.small"
        canonical_request = "GET\n/\n" + canonical_querystring + "\nhost:monitoring.eu-west-1.amazonaws.com\n\nhost\n" \
            + sha256_hex("")
        context = SigningContext("eu-west-1", "monitoring", datetime(2015, 7, 25, 11, 30, tzinfo=timezone.utc))
        signing_key = KeyDerivationChain().derive_key("secret_key", context.datestamp, context.region, context.service)
        authorization, _, _ = self.signer.sign(sha256_hex(canonical_request), context, signing_key, "access_key", "host")
        historical_result = "7ad2788349d53dee9ad212eaf6063134a9f0a9e40de26a346f6aaea750c811de"
        self.assertTrue(authorization.endswith("Signature=" + historical_result))
