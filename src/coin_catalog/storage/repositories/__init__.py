from .coin_storage import InMemoryCoinStorage, JsonFileCoinStorage, records_to_json

__all__ = ["InMemoryCoinStorage", "JsonFileCoinStorage", "records_to_json"]
