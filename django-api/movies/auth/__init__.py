from movies.auth.gate import AuthGate, SessionToken, SignedTokenGate

__all__ = ["AuthGate", "SessionToken", "SignedTokenGate"]
