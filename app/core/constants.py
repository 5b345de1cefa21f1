MIN_RATING = 1
MAX_RATING = 5
MIN_PASSWORD_LENGTH = 6

# session payload key holding the opaque server-side session id
SESSION_ID_KEY = "sid"
