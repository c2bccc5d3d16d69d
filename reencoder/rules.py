"""
Fixed re-encoding rules.

This file exists to keep the byte-level constants in one place.
"""

import codecs

DEFAULT_ADD_BOM = False

# Canonical codec name -> BOM the encoded output should start with.
TARGET_BOMS = {
    "utf-8": codecs.BOM_UTF8,
    "utf-8-sig": codecs.BOM_UTF8,
    "utf-16": codecs.BOM_UTF16,  # platform byte order, as the codec writes it
    "utf-16-le": codecs.BOM_UTF16_LE,
    "utf-16-be": codecs.BOM_UTF16_BE,
    "utf-32": codecs.BOM_UTF32,
    "utf-32-le": codecs.BOM_UTF32_LE,
    "utf-32-be": codecs.BOM_UTF32_BE,
}

# Codecs whose decoder does not consume a leading BOM by itself.
SOURCE_BOMS = {
    "utf-8": (codecs.BOM_UTF8,),
    "utf-16-le": (codecs.BOM_UTF16_LE,),
    "utf-16-be": (codecs.BOM_UTF16_BE,),
    "utf-32-le": (codecs.BOM_UTF32_LE,),
    "utf-32-be": (codecs.BOM_UTF32_BE,),
}

# These decoders strip the BOM themselves.
SELF_STRIPPING = {
    "utf-8-sig": (codecs.BOM_UTF8,),
    "utf-16": (codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE),
    "utf-32": (codecs.BOM_UTF32_LE, codecs.BOM_UTF32_BE),
}

DECODE_ERRORS = "strict"
ENCODE_ERRORS = "strict"

NEW_FILE_MODE = 0o644
TEMP_SUFFIX = ".tmp"

# Registered text codecs that refuse every non-empty input.
REJECTED_CODECS = {"undefined"}
