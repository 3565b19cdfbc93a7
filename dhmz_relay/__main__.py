"""Entry point: ``python -m dhmz_relay`` or the ``dhmz-relay`` script."""

import uvicorn

from dhmz_relay.vars import HOST, LOG_LEVEL, PORT


def main():
    # uvicorn exits with a non-zero status when the port cannot be bound
    uvicorn.run("dhmz_relay.server:app", host=HOST, port=PORT, log_level=LOG_LEVEL)


if __name__ == "__main__":
    main()
