"""
DynamoDB implementation of the document store.

Table layout: partition key "collection" (S), sort key "doc_id" (S).
Document fields are stored as top-level item attributes.
"""

import logging

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import BotoCoreError, ClientError

from .store import DocumentNotFoundError, DocumentStore, StoreError

logger = logging.getLogger(__name__)

KEY_ATTRIBUTES = ('collection', 'doc_id')


class DynamoDbDocumentStore(DocumentStore):
    """Document store backed by a single DynamoDB table."""

    def __init__(self, table_name, region_name=None, endpoint_url=None):
        """
        Args:
            table_name: Name of the DynamoDB table
            region_name: AWS region for the client
            endpoint_url: Optional endpoint override (DynamoDB Local)
        """
        self.table_name = table_name
        self.dynamodb = boto3.resource(
            'dynamodb', region_name=region_name, endpoint_url=endpoint_url
        )
        self.table = self.dynamodb.Table(table_name)
        logger.debug(f'DynamoDB document store initialized for table: {table_name}')

    @staticmethod
    def _key(collection, key):
        return {'collection': collection, 'doc_id': key}

    @staticmethod
    def _strip_keys(item):
        return {k: v for k, v in item.items() if k not in KEY_ATTRIBUTES}

    def _raise_store_error(self, operation, error, collection, key=None):
        if isinstance(error, ClientError):
            error_code = error.response['Error']['Code']
            logger.error(f'DynamoDB {operation} error: {error_code}', extra={
                'table_name': self.table_name,
                'collection': collection,
                'key': key,
            })
            raise StoreError(f"DynamoDB {operation} failed: {error_code}", collection, key) from error

        logger.error(f'DynamoDB connection error during {operation}: {error}')
        raise StoreError(f"Database connection error: {error}", collection, key) from error

    def get(self, collection, key):
        try:
            response = self.table.get_item(Key=self._key(collection, key), ConsistentRead=True)
        except (ClientError, BotoCoreError) as e:
            self._raise_store_error('GetItem', e, collection, key)

        item = response.get('Item')
        if not item:
            return None
        return self._strip_keys(item)

    def set(self, collection, key, fields):
        item = {**dict(fields), **self._key(collection, key)}
        try:
            self.table.put_item(Item=item)
        except (ClientError, BotoCoreError) as e:
            self._raise_store_error('PutItem', e, collection, key)

    def update(self, collection, key, fields):
        fields = {k: v for k, v in dict(fields).items() if k not in KEY_ATTRIBUTES}
        if not fields:
            return

        names = {'#pk': 'collection'}
        values = {}
        assignments = []
        for i, (field, value) in enumerate(fields.items()):
            names[f'#f{i}'] = field
            values[f':v{i}'] = value
            assignments.append(f'#f{i} = :v{i}')

        try:
            self.table.update_item(
                Key=self._key(collection, key),
                UpdateExpression='SET ' + ', '.join(assignments),
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=values,
                ConditionExpression='attribute_exists(#pk)',  # Ensure document exists
            )
        except ClientError as e:
            if e.response['Error']['Code'] == 'ConditionalCheckFailedException':
                logger.info(f'Document not found for update: {collection}/{key}')
                raise DocumentNotFoundError(
                    f"No document to update: {collection}/{key}", collection, key
                ) from e
            self._raise_store_error('UpdateItem', e, collection, key)
        except BotoCoreError as e:
            self._raise_store_error('UpdateItem', e, collection, key)

    def delete(self, collection, key):
        try:
            self.table.delete_item(Key=self._key(collection, key))
        except (ClientError, BotoCoreError) as e:
            self._raise_store_error('DeleteItem', e, collection, key)

    def list(self, collection):
        documents = []
        query_kwargs = {
            'KeyConditionExpression': Key('collection').eq(collection),
            'ConsistentRead': True,
        }
        try:
            while True:
                response = self.table.query(**query_kwargs)
                for item in response.get('Items', []):
                    documents.append((item['doc_id'], self._strip_keys(item)))
                last_key = response.get('LastEvaluatedKey')
                if not last_key:
                    break
                query_kwargs['ExclusiveStartKey'] = last_key
        except (ClientError, BotoCoreError) as e:
            self._raise_store_error('Query', e, collection)

        return documents
