"""Constants for Measure model field names"""


class MeasureFields:
    """Field name constants for Measure model"""
    ID = "id"
    MEASURE_UUID = "measure_uuid"
    CUSTOMER_CODE = "customer_code"
    MEASURE_DATETIME = "measure_datetime"
    BILLING_MONTH = "billing_month"
    MEASURE_TYPE = "measure_type"
    MEASURE_VALUE = "measure_value"
    CONFIRMED_VALUE = "confirmed_value"
    IMAGE_PATH = "image_path"
    CREATED_AT = "created_at"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field


class CounterFields:
    """Field name constants for the sequence counters collection"""
    MONGO_ID = "_id"
    SEQUENCE = "seq"

    # Counter document that hands out Measure.id values
    MEASURES_COUNTER = "measures"
