import uvicorn

from stockapp.config import HOST, PORT


def main():
    uvicorn.run("stockapp.main:app", host=HOST, port=PORT)


if __name__ == "__main__":
    main()
