from datetime import timedelta

from tests.base import ApiTestBase

from app.core.config import settings
from app.core.security import create_jwt, decode_jwt, hash_password
from app.models.admin_user import AdminUser


class AdminAuthTests(ApiTestBase):
    def setUp(self):
        super().setUp()
        self._settings_backup = {
            "ADMIN_BOOTSTRAP_ENABLED": settings.ADMIN_BOOTSTRAP_ENABLED,
            "ADMIN_BOOTSTRAP_USERNAME": settings.ADMIN_BOOTSTRAP_USERNAME,
            "ADMIN_BOOTSTRAP_PASSWORD": settings.ADMIN_BOOTSTRAP_PASSWORD,
        }
        settings.ADMIN_BOOTSTRAP_ENABLED = True
        settings.ADMIN_BOOTSTRAP_USERNAME = "admin"
        settings.ADMIN_BOOTSTRAP_PASSWORD = "adminPassword123"

    def tearDown(self):
        for key, value in self._settings_backup.items():
            setattr(settings, key, value)
        super().tearDown()

    def test_login_bootstraps_admin_when_absent(self):
        response = self.client.post("/api/admin/auth/login", json={"username": "Admin", "password": "adminPassword123"})
        self.assertEqual(response.status_code, 200)
        token = response.json().get("access_token")
        claims = decode_jwt(token, settings.ADMIN_JWT_SECRET)
        self.assertEqual(claims.get("username"), "admin")
        self.assertTrue(claims.get("is_admin"))

        with self.SessionLocal() as db:
            users = db.query(AdminUser).all()
        self.assertEqual(len(users), 1)
        self.assertTrue(users[0].is_admin)

    def test_existing_admin_keeps_own_password(self):
        self.add(AdminUser(username="admin", password_hash=hash_password("rotated-secret"), is_admin=True))

        old = self.client.post("/api/admin/auth/login", json={"username": "admin", "password": "adminPassword123"})
        self.assertEqual(old.status_code, 401)
        self.assertEqual(old.json()["detail"], "Incorrect username or password")

        new = self.client.post("/api/admin/auth/login", json={"username": "admin", "password": "rotated-secret"})
        self.assertEqual(new.status_code, 200)

    def test_non_admin_or_inactive_users_cannot_log_in(self):
        self.add(AdminUser(username="editor", password_hash=hash_password("pw-editor"), is_admin=False))
        self.add(AdminUser(username="former", password_hash=hash_password("pw-former"), is_admin=True, is_active=False))
        for username, password in (("editor", "pw-editor"), ("former", "pw-former"), ("ghost", "x")):
            response = self.client.post("/api/admin/auth/login", json={"username": username, "password": password})
            self.assertEqual(response.status_code, 401, username)

    def test_check_and_logout_require_token(self):
        self.assertEqual(self.client.get("/api/admin/auth/check").status_code, 401)

        headers = self.admin_headers()
        check = self.client.get("/api/admin/auth/check", headers=headers)
        self.assertEqual(check.status_code, 200)
        self.assertEqual(check.json()["user"]["username"], "admin")

        logout = self.client.post("/api/admin/auth/logout", headers=headers)
        self.assertEqual(logout.json(), {"message": "Logout successful"})

    def test_invalid_and_non_admin_tokens_are_rejected(self):
        bad = self.client.get("/api/admin/stats", headers={"Authorization": "Bearer not-a-token"})
        self.assertEqual(bad.status_code, 401)

        token = create_jwt({"sub": "x", "username": "reader"}, settings.ADMIN_JWT_SECRET, timedelta(minutes=5))
        forbidden = self.client.get("/api/admin/stats", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(forbidden.status_code, 403)

        expired = create_jwt({"sub": "x", "is_admin": True}, settings.ADMIN_JWT_SECRET, timedelta(minutes=-5))
        response = self.client.get("/api/admin/stats", headers={"Authorization": f"Bearer {expired}"})
        self.assertEqual(response.status_code, 401)
