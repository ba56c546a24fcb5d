# Log event names
SHORTEN_SUCCESS = 'SHORTEN_SUCCESS'
MALFORMED_REQUEST = 'MALFORMED_REQUEST'
STORAGE_WRITE_FAILED = 'STORAGE_WRITE_FAILED'

# Request body fields
ORIGINAL_URL_FIELD = 'originalUrl'
EXPIRATION_TIME_FIELD = 'expirationTime'
