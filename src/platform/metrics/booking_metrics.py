from prometheus_client import Counter, Histogram


class BookingMetrics:
    """
    Class Booking Core Metrics Collector

    Tracks reservation outcomes, optimistic-retry pressure on the seat
    indexes, payments and authentication results.
    """

    def __init__(self):
        # ========== Reservation Business Metrics ==========
        self.reservation_requests = Counter(
            'reservation_requests_total',
            'Total reservation requests',
            ['source', 'result'],  # source: reservation/payment
        )

        self.reservation_duration = Histogram(
            'reservation_duration_seconds',
            'Reservation processing time including retries',
            ['source'],
            buckets=[0.005, 0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0],
        )

        self.reservation_conflict_retries = Counter(
            'reservation_conflict_retries_total',
            'Unit of work re-runs caused by a concurrent booking on the same slot',
            ['source'],
        )

        self.reservation_cancellations = Counter(
            'reservation_cancellations_total',
            'Total cancellation requests',
            ['result'],
        )

        # ========== Payment Metrics ==========
        self.payments_recorded = Counter(
            'payments_recorded_total',
            'Total payment confirmations recorded',
            ['method', 'result'],
        )

        # ========== Auth Metrics ==========
        self.auth_events = Counter(
            'auth_events_total',
            'Authentication events',
            ['action', 'result'],  # action: signup/login/refresh/logout
        )

    # ========== Helper Methods ==========

    def record_reservation(self, *, source: str, result: str, duration: float):
        self.reservation_requests.labels(source=source, result=result).inc()
        self.reservation_duration.labels(source=source).observe(duration)

    def record_conflict_retry(self, *, source: str):
        self.reservation_conflict_retries.labels(source=source).inc()

    def record_cancellation(self, *, result: str):
        self.reservation_cancellations.labels(result=result).inc()

    def record_payment(self, *, method: str, result: str):
        self.payments_recorded.labels(method=method, result=result).inc()

    def record_auth(self, *, action: str, result: str):
        self.auth_events.labels(action=action, result=result).inc()


# Global metrics instance
metrics = BookingMetrics()
