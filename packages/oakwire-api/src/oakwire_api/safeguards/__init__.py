from oakwire_api.safeguards.audit import AuditLog, mask_account

__all__ = ["AuditLog", "mask_account"]
