from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from werkzeug.security import check_password_hash

from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from .model import Profile
from .repository import ProfileRepository


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    profile_id: int
    full_name: str
    role: Role


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, profiles: ProfileRepository):
        self._profiles = profiles

    def authenticate(self, email: str, password: str) -> SessionUser:
        email = (email or "").strip().lower()
        profile = self._profiles.get_by_email(email) if email else None
        if not profile:
            raise AuthenticationError("Sai email hoặc mật khẩu")

        try:
            ok = check_password_hash(profile.password_hash, password or "")
        except Exception:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Sai email hoặc mật khẩu")

        return SessionUser(
            profile_id=profile.profile_id,
            full_name=profile.full_name or profile.email or "",
            role=profile.role,
        )


class ProfileService:
    """Use case: manage profiles (admin)."""

    def __init__(self, profiles: ProfileRepository):
        self._profiles = profiles

    def search(self, term: str = "") -> Sequence[Profile]:
        term = (term or "").strip().lower()
        profiles = self._profiles.list_all()
        if not term:
            return profiles
        return [
            p
            for p in profiles
            if term in (p.full_name or "").lower() or term in (p.email or "").lower() or term in p.role.value
        ]

    def change_role(self, *, profile_id: int, new_role: str) -> None:
        try:
            role = Role(require_non_empty(new_role, "Vai trò"))
        except ValueError:
            raise ValidationError("Vai trò không hợp lệ")

        if not self._profiles.get_by_id(int(profile_id)):
            raise NotFoundError("Người dùng không tồn tại")
        self._profiles.set_role(int(profile_id), role)

    def get(self, profile_id: int) -> Optional[Profile]:
        return self._profiles.get_by_id(int(profile_id))
