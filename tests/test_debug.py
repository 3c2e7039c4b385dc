import unittest

from srtp_auth import DebugModule, HmacSha1
from srtp_auth.debug import mod_auth
from srtp_auth.utils import MAX_PRINT_STRING_LEN, HexString, octet_string_hex_string


class TestDebugModule(unittest.TestCase):
    def test_logger_name_is_derived_from_module_name(self):
        self.assertEqual(DebugModule("hmac sha-1").logger.name, "srtp_auth.hmac_sha_1")
        self.assertEqual(mod_auth.logger.name, "srtp_auth.auth_func")

    def test_off_by_default(self):
        module = DebugModule("quiet module")
        self.assertFalse(module.on)
        with self.assertNoLogs("srtp_auth.quiet_module", level="DEBUG"):
            module.print("value %d", 1)

    def test_enabled_module_logs(self):
        module = DebugModule("loud module")
        module.enable()
        with self.assertLogs("srtp_auth.loud_module", level="DEBUG") as cm:
            module.print("value %d", 7)
        self.assertEqual(cm.records[0].getMessage(), "loud module: value 7")
        module.disable()
        self.assertFalse(module.on)

    def test_injected_module_traces_hmac(self):
        module = DebugModule("hmac trace", on=True)
        at = HmacSha1(debug=module)
        self.assertIs(at.debug, module)
        with self.assertLogs("srtp_auth.hmac_trace", level="DEBUG") as cm:
            with at.alloc(20, 4) as auth:
                auth.init(b"\x0b" * 20)
                auth.start()
                auth.compute(b"Hi There")
        messages = [r.getMessage() for r in cm.records]
        self.assertIn("hmac trace: allocating auth func with key length 20", messages)
        self.assertIn("hmac trace: input: 4869205468657265", messages)
        self.assertIn("hmac trace: output: b6173186", messages)

    def test_descriptors_get_separate_default_modules(self):
        a, b = HmacSha1(), HmacSha1()
        self.assertIsNot(a.debug, b.debug)
        self.assertEqual(a.debug.name, "hmac sha-1")


class TestHexHelpers(unittest.TestCase):
    def test_hex_string(self):
        self.assertEqual(octet_string_hex_string(b"\x00\xab"), "00ab")
        self.assertEqual(str(HexString(bytearray(b"\x01\x02"))), "0102")

    def test_hex_string_is_truncated(self):
        out = octet_string_hex_string(b"\xff" * 4096)
        self.assertEqual(len(out), MAX_PRINT_STRING_LEN)


if __name__ == "__main__":
    unittest.main()
