"""Application-level constants."""

# HTTP response messages
SAVE_OK_MESSAGE = "Survey saved successfully"
DELETE_OK_MESSAGE = "All surveys deleted"
FETCH_ERROR_PREFIX = "Failed to fetch surveys"
SAVE_ERROR_PREFIX = "Failed to save survey"
DELETE_ERROR_MESSAGE = "Failed to delete surveys"

# CSV download
EXPORT_COLUMNS = [
    "ID",
    "名前",
    "年齢",
    "コーヒー名",
    "タイムスタンプ",
    "選択したフレーバー数",
    "フレーバー詳細",
]
EXPORT_FLAVOR_SEP = ">"
EXPORT_FLAVOR_JOIN = "; "
EXPORT_FILENAME_TEMPLATE = "coffee-flavor-survey-{date}.csv"
EXPORT_MEDIA_TYPE = "text/csv; charset=utf-8"
