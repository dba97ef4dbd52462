#!/usr/bin/env python3
"""MongoDB document store using Motor (async PyMongo)"""

from motor.motor_asyncio import AsyncIOMotorClient
from typing import Dict, Any, List, Optional
import asyncio
import logging

from mongo.constants import DATABASE_NAME, MONGODB_CONNECTION_STRING
from mongo.registry import relation_for
from engine.populate import PopulateNode

# Configure logging
logger = logging.getLogger(__name__)


class MongoConnection:
    """Shared Motor client with a lazily-opened connection pool"""

    def __init__(self, connection_string: str = MONGODB_CONNECTION_STRING, database: str = DATABASE_NAME):
        self.client: AsyncIOMotorClient | None = None
        self.connected = False
        self._connect_lock = asyncio.Lock()
        self.connection_string = connection_string
        self.database = database

    async def connect(self):
        """Initialize MongoDB connection"""
        try:
            async with self._connect_lock:
                if self.connected and self.client:
                    return

                self.client = AsyncIOMotorClient(
                    self.connection_string,
                    maxPoolSize=50,
                    minPoolSize=0,
                    serverSelectionTimeoutMS=5000,
                    connectTimeoutMS=10000,
                    socketTimeoutMS=20000,
                )

                # Test connection
                await self.client.admin.command('ping')

                self.connected = True
                logger.info(f"Connected to MongoDB database '{self.database}'")

        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise

    async def disconnect(self):
        """Disconnect from MongoDB"""
        if self.client:
            self.client.close()
        self.connected = False
        self.client = None

    def collection(self, name: str):
        if not self.client:
            raise RuntimeError("MongoDB client not initialized. Call connect() first.")
        return self.client[self.database][name]


class MongoDocumentStore:
    """DocumentStore over one collection, resolving populate plans via the relation registry"""

    def __init__(self, connection: MongoConnection, collection: str):
        self.connection = connection
        self.collection_name = collection

    @property
    def collection(self):
        return self.connection.collection(self.collection_name)

    async def count(self, filter: Dict[str, Any]) -> int:
        try:
            return await self.collection.count_documents(filter)
        except Exception as e:
            logger.error(f"count on '{self.collection_name}' failed: {e}")
            raise

    async def find(
        self,
        filter: Dict[str, Any],
        sort: Dict[str, int],
        skip: int,
        limit: Optional[int],
        projection: Optional[List[str]] = None,
        populate: Optional[List[PopulateNode]] = None,
    ) -> List[Dict[str, Any]]:
        fields = None
        if projection:
            # Populated paths must survive an inclusive projection
            fields = {f: 1 for f in projection}
            for node in populate or []:
                fields[node.path] = 1

        try:
            cursor = self.collection.find(
                filter,
                projection=fields,
                sort=list(sort.items()) or None,
                skip=skip,
                limit=limit or 0,  # 0 = no limit
            )
            results = await cursor.to_list(length=None)
        except Exception as e:
            logger.error(f"find on '{self.collection_name}' failed: {e}")
            raise

        if populate:
            await self._populate(results, populate, self.collection_name)
        return results

    async def aggregate(self, pipeline: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Execute an aggregation pipeline and return every result document"""
        try:
            cursor = self.collection.aggregate(pipeline)
            return await cursor.to_list(length=None)
        except Exception as e:
            logger.error(f"aggregate on '{self.collection_name}' failed: {e}")
            raise

    async def _populate(self, documents: List[Dict[str, Any]], plan: List[PopulateNode], collection: str) -> None:
        for node in plan:
            rel = relation_for(collection, node.path)
            if not rel:
                logger.warning(f"No relation registered for '{collection}.{node.path}'; skipping populate")
                continue

            refs = []
            for doc in documents:
                value = doc.get(node.path)
                refs.extend(_references(value))
            if not refs:
                continue

            target = rel["target"]
            foreign_field = rel.get("foreignField", "_id")
            projection = {f: 1 for f in node.select}
            projection[foreign_field] = 1
            for child in node.children:
                projection[child.path] = 1

            cursor = self.connection.collection(target).find({foreign_field: {"$in": refs}}, projection=projection)
            related = await cursor.to_list(length=None)
            if node.children:
                await self._populate(related, node.children, target)

            by_key = {}
            for rdoc in related:
                key = rdoc.get(foreign_field)
                if _hashable(key):
                    by_key[key] = rdoc
            if foreign_field != "_id" and foreign_field not in node.select:
                for rdoc in related:
                    rdoc.pop(foreign_field, None)

            for doc in documents:
                if node.path not in doc:
                    continue
                value = doc[node.path]
                if isinstance(value, list):
                    doc[node.path] = [by_key[v] for v in value if _hashable(v) and v in by_key]
                elif _hashable(value):
                    doc[node.path] = by_key.get(value)


def _hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


def _references(value: Any) -> List[Any]:
    if value is None or isinstance(value, dict):
        return []
    if isinstance(value, list):
        return [v for v in value if v is not None and not isinstance(v, dict)]
    return [value]


# Global instance
mongo_connection = MongoConnection()
