import unittest

from srtp_auth import (
    AuthAlgorithm,
    AuthKernel,
    AuthPolicy,
    BadParameterError,
    HmacSha1,
    NoSuchAlgorithmError,
    NullAuth,
)


class TestAuthPolicy(unittest.TestCase):
    def setUp(self):
        self.kernel = AuthKernel()
        self.kernel.load_auth_type(NullAuth())
        self.kernel.load_auth_type(HmacSha1())

    def test_presets(self):
        self.assertEqual(AuthPolicy.hmac_sha1_80(), AuthPolicy(AuthAlgorithm.HMAC_SHA1, 20, 10))
        self.assertEqual(AuthPolicy.hmac_sha1_32(), AuthPolicy(AuthAlgorithm.HMAC_SHA1, 20, 4))
        self.assertEqual(AuthPolicy.null_auth(), AuthPolicy(AuthAlgorithm.NULL_AUTH, 0, 0))
        self.assertEqual(AuthPolicy(), AuthPolicy.hmac_sha1_80())

    def test_from_dict_accepts_names_and_ids(self):
        for raw in ("hmac-sha1", "HMAC_SHA1", 3, "3"):
            policy = AuthPolicy.from_dict({"auth_type": raw, "auth_tag_len": 4})
            self.assertEqual(policy, AuthPolicy.hmac_sha1_32())

    def test_from_dict_rejects_unknown_type(self):
        with self.assertRaises(BadParameterError):
            AuthPolicy.from_dict({"auth_type": "poly1305"})
        with self.assertRaises(BadParameterError):
            AuthPolicy.from_dict({"auth_type": 42})

    def test_runtime_dict_roundtrip(self):
        policy = AuthPolicy.hmac_sha1_32()
        data = policy.as_runtime_dict()
        self.assertEqual(data, {"auth_type": "HMAC_SHA1", "auth_key_len": 20, "auth_tag_len": 4})
        self.assertEqual(AuthPolicy.from_dict(data), policy)

    def test_validate(self):
        AuthPolicy.hmac_sha1_80().validate(self.kernel)
        AuthPolicy.null_auth().validate(self.kernel)
        with self.assertRaises(BadParameterError):
            AuthPolicy(AuthAlgorithm.HMAC_SHA1, 20, 21).validate(self.kernel)
        with self.assertRaises(BadParameterError):
            AuthPolicy(AuthAlgorithm.HMAC_SHA1, -1, 10).validate(self.kernel)
        with self.assertRaises(NoSuchAlgorithmError):
            AuthPolicy(AuthAlgorithm.UST_TMMHV2, 16, 4).validate(self.kernel)

    def test_create_auth(self):
        with AuthPolicy.hmac_sha1_32().create_auth(self.kernel) as auth:
            self.assertIsInstance(auth.type, HmacSha1)
            self.assertEqual(auth.get_key_length(), 20)
            self.assertEqual(auth.get_tag_length(), 4)
            auth.init(b"\x0b" * 20)
            auth.start()
            self.assertEqual(auth.compute(b"Hi There").hex(), "b6173186")

    def test_create_auth_uses_default_kernel(self):
        with AuthPolicy.null_auth().create_auth() as auth:
            self.assertIsInstance(auth.type, NullAuth)


if __name__ == "__main__":
    unittest.main()
