DECODE_FAILURE_MESSAGE = "cannot decode machine object"

ERRORS = {
  "E_SIGNATURE": "Magic signature not recognized",
  "E_VERSION": "Major revision not supported",
  "E_ENTRY_MALFORMED": "Header, table entry or string extends past end of stream",
  "E_POSITION": "Stream position changed outside the reader",
  "E_CHARSET": "String bytes not valid in the configured encoding",
  "E_IO": "Underlying stream I/O failure",
  "E_UNKNOWN": "Unexpected failure while decoding",
}
