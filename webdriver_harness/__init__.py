"""Remote WebDriver test harness with layered configuration and result storage."""
