from hypothesis import HealthCheck, settings

# Hypothesis builds its unicode character table on first use of st.text(),
# which on a cold cache trips the input-generation speed health check.
settings.register_profile("default", suppress_health_check=[HealthCheck.too_slow])
settings.load_profile("default")
