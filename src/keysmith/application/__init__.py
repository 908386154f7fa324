"""Application layer - the service facade and request/response contract."""
