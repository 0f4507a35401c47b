from moneykit.serialization.db_codec import DbCodec
from moneykit.serialization.json_codec import DefaultJsonStrategy, JsonCodec, JsonStrategy

__all__ = [
    "DbCodec",
    "DefaultJsonStrategy",
    "JsonCodec",
    "JsonStrategy",
]
