"""Default configuration settings for gitstamp."""

DEFAULT_CONFIG = {
	# Version resolution
	"version": {
		# Only tags starting with this prefix are considered (empty matches all)
		"prefix": "",
	},
	# Git invocation
	"git": {
		# Name or path of the git executable
		"executable": "git",
		# Placeholder identity set in test repositories that have none
		"test_user_email": "email@example.com",
		"test_user_name": "name",
	},
	# Logging
	"logging": {
		# Directory for log files written with --save-log
		"log_dir": "logs",
	},
}
