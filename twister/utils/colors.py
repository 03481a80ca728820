class Colors:
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    LIGHTBLUE = "\033[94m"
    LIGHTYELLOW = "\033[93m"
