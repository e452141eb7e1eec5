"""
User
---------------------------
"""
from tortoise import Model, fields


class User(Model):
    """
    Represents a registered User in the system.
    """

    id = fields.IntField(primary_key=True)
    username = fields.CharField(max_length=255, unique=True)
    password_hash = fields.CharField(max_length=128)

    email = fields.CharField(max_length=255, unique=True)
    name = fields.CharField(max_length=255)

    class Meta:
        table = "users"

    def __str__(self):
        return f"[{self.id}] {self.username} ({self.email})"
