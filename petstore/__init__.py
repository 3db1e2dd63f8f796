# Neon Pet Store
