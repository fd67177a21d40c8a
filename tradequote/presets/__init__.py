"""
Trade and job presets used to pre-fill the job form.
"""
