from connectagrapher.core.config import Settings


def test_cors_origins_from_comma_list():
    s = Settings(_env_file=None, CORS_ORIGINS="https://a.example, https://b.example")
    assert s.CORS_ORIGINS == ["https://a.example", "https://b.example"]


def test_cors_allow_all():
    s = Settings(_env_file=None, CORS_ALLOW_ALL=True)
    assert s.CORS_ORIGINS == ["*"]


def test_resend_inferred_from_api_key():
    s = Settings(_env_file=None, EMAIL_TRANSPORT="", RESEND_API_KEY="re_123")
    assert s.EMAIL_TRANSPORT == "resend"


def test_transport_and_app_url_normalized():
    s = Settings(_env_file=None, EMAIL_TRANSPORT=" SMTP ", APP_URL="https://studio.example/")
    assert s.EMAIL_TRANSPORT == "smtp"
    assert s.APP_URL == "https://studio.example"
