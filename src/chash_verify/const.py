ERRORS = {
  "E_CONTENTHASH": "Content hash could not be read",
  "E_HEX_MALFORMED": "Content hash is not a valid hex string",
  "E_VARINT_MALFORMED": "Codec prefix is not a canonical varint",
  "E_CODE_UNKNOWN": "Codec prefix is not in the multicodec table",
  "E_CODEC_UNSUPPORTED": "Codec name is not in the multicodec table",
  "E_CID_MALFORMED": "Payload is not a valid CID",
  "E_CODEC_MISMATCH": "Codec does not match the expected codec",
}
