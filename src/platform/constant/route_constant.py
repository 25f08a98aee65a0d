# Auth
AUTH_BASE = '/api/auth'
AUTH_SIGNUP = f'{AUTH_BASE}/signup'
AUTH_LOGIN = f'{AUTH_BASE}/login'
AUTH_REFRESH = f'{AUTH_BASE}/refresh'
AUTH_LOGOUT = f'{AUTH_BASE}/logout'
AUTH_ME = f'{AUTH_BASE}/me'

# User
USER_BASE = '/api/users'
USER_GET = f'{USER_BASE}/{{user_id}}'

# Class catalog
CLASS_BASE = '/api/classes'
CLASS_GET = f'{CLASS_BASE}/{{class_id}}'

# Reservation
RESERVATION_BASE = '/api/reservations'
RESERVATION_CANCEL = f'{RESERVATION_BASE}/{{reservation_id}}/cancel'
RESERVATION_MY = f'{RESERVATION_BASE}/my'

# Teacher
TEACHER_BASE = '/api/teachers'
TEACHER_MY_SCHEDULE = f'{TEACHER_BASE}/my-schedule'
TEACHER_SCHEDULE_STUDENTS = f'{TEACHER_BASE}/schedule/{{time_id}}/students'

# Payment
PAYMENT_BASE = '/api/payments'
PAYMENT_COMPLETE = f'{PAYMENT_BASE}/complete'

# Common
HEALTH = '/health'
METRICS = '/metrics'
