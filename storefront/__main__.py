import uvicorn
from storefront.core.config import Settings

if __name__ == "__main__":
    uvicorn.run("storefront.main:create_app", factory=True, host="0.0.0.0", port=Settings().PORT)
