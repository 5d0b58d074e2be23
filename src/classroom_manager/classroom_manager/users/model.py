from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Profile:
    """Thực thể miền (domain): Hồ sơ người dùng.

    Lưu ý: Đây là đối tượng dữ liệu thuần (không chứa code truy cập DB).
    """

    profile_id: int
    full_name: Optional[str]
    email: Optional[str]
    password_hash: str
    role: Role
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "profile_id": self.profile_id,
            "full_name": self.full_name,
            "email": self.email,
            "role": self.role.value,
            "avatar_url": self.avatar_url,
        }
