"""
Unit Tests für Konfiguration
"""

import os
from unittest.mock import patch

import pytest

from dualaxis.config.settings import (
    DEFAULT_SESSION_STATE,
    ChartSettings,
    init_session_state,
    load_settings,
)

ENV_KEYS = [
    'DUALAXIS_LABEL_SEPARATOR',
    'DUALAXIS_DEFAULT_TIMEZONE',
    'DUALAXIS_TEMPLATE',
    'DUALAXIS_HEIGHT',
    'DUALAXIS_TIME_FALLBACK',
    'DUALAXIS_Y1_FALLBACK',
    'DUALAXIS_Y2_FALLBACK',
    'DUALAXIS_NOTIFY_DROPPED',
]


@pytest.fixture
def clean_env(monkeypatch):
    # patch.dict stellt auch Werte wieder her, die load_dotenv gesetzt hat
    with patch.dict(os.environ):
        for key in ENV_KEYS:
            os.environ.pop(key, None)
        yield monkeypatch


class TestChartSettings:
    """Tests für ChartSettings"""

    def test_defaults(self):
        """Test: Standardwerte aus CHART_CONFIG und FALLBACK_POSITIONS"""
        settings = ChartSettings()

        assert settings.label_separator == ', '
        assert settings.time_fallback == 1
        assert settings.y1_fallback == 1
        assert settings.y2_fallback is None
        assert settings.default_timezone == 'UTC'
        assert not settings.notify_dropped

    def test_invalid_fallback(self):
        """Test: Fallback-Position muss int oder None sein"""
        with pytest.raises(ValueError):
            ChartSettings(y1_fallback='first')

    def test_invalid_height(self):
        """Test: Höhe muss positiv sein"""
        with pytest.raises(ValueError):
            ChartSettings(height=0)

    def test_with_overrides(self):
        """Test: Overrides ändern nur die angegebenen Felder"""
        settings = ChartSettings().with_overrides(title="Weather", y2_fallback=1)

        assert settings.title == "Weather"
        assert settings.y2_fallback == 1
        assert settings.y1_fallback == 1


class TestLoadSettings:
    """Tests für load_settings()"""

    def test_without_environment(self, clean_env):
        """Test: Ohne Umgebungsvariablen -> Standardwerte"""
        assert load_settings() == ChartSettings()

    def test_environment_overrides(self, clean_env):
        """Test: DUALAXIS_* Variablen überschreiben die Standardwerte"""
        clean_env.setenv('DUALAXIS_LABEL_SEPARATOR', ' / ')
        clean_env.setenv('DUALAXIS_HEIGHT', '320')
        clean_env.setenv('DUALAXIS_Y1_FALLBACK', 'none')
        clean_env.setenv('DUALAXIS_Y2_FALLBACK', '2')
        clean_env.setenv('DUALAXIS_NOTIFY_DROPPED', 'true')

        settings = load_settings()

        assert settings.label_separator == ' / '
        assert settings.height == 320
        assert settings.y1_fallback is None
        assert settings.y2_fallback == 2
        assert settings.notify_dropped

    def test_env_file(self, clean_env, tmp_path):
        """Test: Werte aus einer .env Datei"""
        env_file = tmp_path / 'chart.env'
        env_file.write_text("DUALAXIS_DEFAULT_TIMEZONE=Europe/Berlin\n")

        assert load_settings(str(env_file)).default_timezone == 'Europe/Berlin'

    def test_invalid_number(self, clean_env):
        """Test: Ungültige Zahl in der Umgebung -> ValueError"""
        clean_env.setenv('DUALAXIS_TIME_FALLBACK', 'first')
        with pytest.raises(ValueError):
            load_settings()


class TestSessionState:
    @patch('streamlit.session_state', new_callable=dict)
    def test_init_session_state_keeps_existing_values(self, mock_session_state):
        """Test: Vorhandene Werte bleiben, fehlende werden ergänzt"""
        mock_session_state['live_mode'] = True

        init_session_state()

        assert mock_session_state['live_mode'] is True
        assert mock_session_state['refresh_interval'] == DEFAULT_SESSION_STATE['refresh_interval']
