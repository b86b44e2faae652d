# IETF AI Assistant backend.
# Chat proxy (generate/) + static catalog panels (search/).
