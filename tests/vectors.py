"""Known keypair and token produced by the ejson tool."""

PUBLIC_KEY = "af33e849c33dd190ba01b2d50c898190f8da09082fbf1a244e4af9d62479d932"
PRIVATE_KEY = "ddbd617e7826292966fe1b8686b32e2214fa3e8633881ae6a31edf6175b790a2"
ENCRYPTER_PUBLIC = "jeDOl5qTBwflgRuusXrqoT5eclnznLKuCp8fxbuHjGg="
NONCE = "fRVLp8YU/m9sb04HKAN9r8RVzLNWkdTu"
BOX = "uhoMKBnFTUDSO5nayF/Wx/D+d8dPBIlLUJq8KA=="
TOKEN = f"EJ[1:{ENCRYPTER_PUBLIC}:{NONCE}:{BOX}]"
PLAINTEXT = "Hello World!"

# All-zero Curve25519 point; valid base64 of the right length
LOW_ORDER_PUBLIC = "A" * 43 + "="
