"""
Business services. Each returns a ServiceResult; failures carry the
message shown to the client.
"""
